"""Core of a declarative, reactive user-interface toolkit: geometry, alignment, regions, colours, paints, events, state, lenses, bindings and the view base class."""

__version__ = "0.1.0"