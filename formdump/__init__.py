"""
# Formdump: resources out of FORM archives.

A file format is described as a hierarchy of records: a Chunk lists its
fields in the order they appear in the binary data, each field knows how
many bytes it takes and how to unpack itself from a stream.

Two kinds of layout are common in the archives we care about:

 1. sequential: a record follows the previous one, its size declared
    in a header (or derivable from its fields).
 2. referenced: a table of absolute offsets points to records living
    anywhere in the file, so we need to jump back and forth.

The stream is the only owner of the read position; records are transient
views built while unpacking.
"""
