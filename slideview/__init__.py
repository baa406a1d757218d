"""Image viewer building blocks: EXIF summaries, Nikon maker notes, navigation maths, button bindings and text styles."""

__version__ = "0.1.0"