"""Rendering subpackage.

Turns quantized synthesis results into Pillow images and PNG files. See
:mod:`grid_texture.renderer.texture`.
"""
