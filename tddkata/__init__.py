"""Small test-driven katas: greetings, sums, shapes, a wallet, a dictionary,
Roman numerals, an SVG clock face, a value walker, URL checks and blog post
parsing."""

__version__ = "0.1.0"