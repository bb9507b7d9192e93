"""puzzlecodec: decode FEN and coordinate move text into packed puzzle records."""

__version__ = "0.1.0"
