"""levelbuilder: deferred construction of level-editor map feature generators."""

__version__ = "0.1.0"
