"""Console output: Rich theme, value formatting, and result rendering."""
