"""Rendering subpackage.

Turns resolved :class:`pixel_sprites.grid.Grid` silhouettes into pixels:

* :mod:`pixel_sprites.renderer.pixels` maps cell codes to RGBA with a random
    hue/brightness gradient (or plain black and white in monochrome mode).
* :mod:`pixel_sprites.renderer.sheet` tiles many sprites into a single Pillow
    image for previews and atlases.

Both work on plain :class:`pixel_sprites.buffer.PixelBuffer` objects; nothing
here owns a drawing surface.
"""
