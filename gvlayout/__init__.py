"""Parse GraphViz DOT files, keep ranked DAGs and draw shapes and arrows to SVG."""

__version__ = "0.1.0"