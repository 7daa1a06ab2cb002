"""Shared enums, interfaces, geometry, colors, styles and file utilities."""