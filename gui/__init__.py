"""Qt-side helpers: background workers for the codec."""
