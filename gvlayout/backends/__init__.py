"""Rendering backends that accept draw calls; currently SVG."""