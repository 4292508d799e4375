"""R-MAT synthetic graph generation: recursive quadrant fill, stats, rendering."""
