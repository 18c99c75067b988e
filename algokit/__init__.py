"""Big integers with FFT and Karatsuba multiplication, a comparator heap, and bounded-palindrome counters."""

__version__ = "0.1.0"
__all__ = [
    "bigint",
    "multiply",
    "heap",
    "palindromes",
    "segment_palindromes",
    "block_palindromes",
    "manacher_palindromes",
]