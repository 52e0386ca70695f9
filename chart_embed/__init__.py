"""Sheets Chart Embed — responsive, animated embeds for Google Sheets charts.

Turns pasted iframe markup or tabular data into a render config, encodes it
into a shareable URL, and generates self-contained snippets that scale the
chart to its container and reveal it on scroll.
"""

__version__ = "0.1.0"
