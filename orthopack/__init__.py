"""orthopack — orthogonal regions as vertex lists, and a rectangle packer.

Packages:

  geometry  — vertex lists (union, transform, box decomposition),
              morphology, and the STRtree intersection index
  packer    — RectArrangement: greedy placement around a center point
  web       — JSON HTTP service around RectArrangement
"""

__version__ = "0.1.0"
