"""Fixed codec constants."""

# Encoder input cap (pixels per side)
MAX_INPUT_SIZE = 100

# Decoded placeholder size along the major axis
OUTPUT_SIZE = 32

# Header layout
HEADER_LENGTH = 5
HEADER_LENGTH_ALPHA = 6
MIN_HASH_LENGTH = HEADER_LENGTH

# Grid limits along the major axis
LUMA_LIMIT = 7
LUMA_LIMIT_ALPHA = 5
MIN_LUMA_GRID = 3

# Fixed chroma (3x3) and alpha (5x5) grids
CHROMA_GRID = 3
ALPHA_GRID = 5
CHROMA_AC_COUNT = 5
ALPHA_AC_COUNT = 14

# Chroma scale boost applied on decode
CHROMA_SCALE_BOOST = 1.25

PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'
IEND_CHUNK = b'\x00\x00\x00\x00IEND\xaeB`\x82'
ZLIB_HEADER = b'\x78\x01'

CRC32_POLYNOMIAL = 0xEDB88320
ADLER_MOD = 65521
# Largest n such that 255n(n+1)/2 + (n+1)(ADLER_MOD-1) fits in 32 bits
ADLER_NMAX = 5552
