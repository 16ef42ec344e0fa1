"""Infrastructure layer: vault file storage.

Reads and writes record files on disk. Pure parsing and rendering live in
:mod:`journalfm.domain`; this layer only moves text between records and
the filesystem.
"""
