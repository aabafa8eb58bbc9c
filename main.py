"""
ThumbHash Studio
Compact image placeholders: encode, decode, and render to PNG
"""

import sys
import warnings

warnings.filterwarnings('ignore', category=RuntimeWarning)


USAGE = """Usage: python main.py <image_path> [max_size] [-o placeholder.png]
       python main.py --synthetic <solid|gradient|checkerboard|radial_alpha> [-o placeholder.png]
       python main.py --decode <base64_hash> [-o placeholder.png]"""


def _split_output(args):
    """Pull '-o <path>' out of the argument list."""
    output = "placeholder.png"
    if '-o' in args:
        i = args.index('-o')
        if i + 1 >= len(args):
            print(USAGE)
            sys.exit(2)
        output = args[i + 1]
        args = args[:i] + args[i + 2:]
    return args, output


def run_decode(encoded: str, output: str):
    """Decode a base64 hash and write its placeholder PNG."""
    from engines.thumbhash import ThumbHash
    
    thumb = ThumbHash.from_base64(encoded)
    image = thumb.to_rgba()
    color = thumb.to_average_color()
    
    print(f"Hash:      {thumb.byte_length} bytes, alpha={thumb.has_alpha}")
    print(f"Aspect:    {thumb.to_aspect_ratio():.3f}")
    print(f"Average:   {color}")
    print(f"Decoded:   {image}")
    
    with open(output, 'wb') as f:
        f.write(thumb.to_png_bytes())
    print(f"\nSaved: {output}")


def run_encode(args, output: str):
    """Encode an image file or synthetic image, then decode it back."""
    import base64
    from models.encode_params import EncodeParams
    from engines.pipeline import rgba_to_thumbhash, thumbhash_to_rgba
    from engines.png_encoder import thumbhash_image_to_png
    from utils.image_io import load_image, fit_within
    from utils.metrics import compare_placeholder, Timer
    from utils.test_images import generate_demo_image
    
    if args[0] == '--synthetic':
        key = args[1] if len(args) > 1 else 'gradient'
        print(f"Generating test image: {key}")
        image = generate_demo_image(key)
        if image is None:
            print(f"Unknown synthetic image: {key}")
            sys.exit(2)
        params = EncodeParams()
    else:
        print(f"Loading: {args[0]}")
        image = load_image(args[0])
        params = EncodeParams(max_size=int(args[1]) if len(args) > 1 else 100)
    
    print(f"Image: {image.shape[1]}x{image.shape[0]}")
    fitted = fit_within(image, params.max_size, params.interpolation)
    h, w = fitted.shape[:2]
    print(f"Fitted: {w}x{h}")
    
    timer = Timer()
    blob = timer.measure_encode(rgba_to_thumbhash, w, h, fitted)
    decoded = timer.measure_decode(thumbhash_to_rgba, blob)
    png = timer.measure_png(thumbhash_image_to_png, decoded)
    metrics = compare_placeholder(fitted, decoded.to_array())
    
    print("\n=== Results ===")
    print(f"Hash:      {base64.b64encode(blob).decode('ascii')}")
    print(f"Length:    {len(blob)} bytes")
    print(f"Decoded:   {decoded.width}x{decoded.height}")
    print(f"PSNR(RGB): {metrics['psnr_rgb']:.2f} dB")
    print(f"SSIM(RGB): {metrics['ssim_rgb']:.4f}")
    print(f"MAE(A):    {metrics['mae_a']:.2f}")
    print(f"Time:      encode {timer.encode_time_ms:.2f} ms, decode {timer.decode_time_ms:.2f} ms, "
          f"png {timer.png_time_ms:.2f} ms")
    
    with open(output, 'wb') as f:
        f.write(png)
    print(f"\nSaved: {output}")


def main():
    args, output = _split_output(sys.argv[1:])
    
    if not args or args[0] == '--help':
        print(USAGE)
        sys.exit(0)
    
    if args[0] == '--decode':
        if len(args) < 2:
            print(USAGE)
            sys.exit(2)
        run_decode(args[1], output)
    else:
        run_encode(args, output)


if __name__ == '__main__':
    main()
