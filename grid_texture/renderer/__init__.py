"""Rendering subpackage.

Maps categorical pixels to display colors for previews and debugging. The
compositing core never renders; this is the host-side collaborator that
consumes ``get_pixel`` answers:

* A palette maps each :class:`~grid_texture.types.TilePixel` to RGBA.
* Block materials can be rendered over a whole occupancy grid, resolving
  each cell's neighbor ring.
* Texture filters become transparency.

See :mod:`grid_texture.renderer.preview`.
"""
