"""
VectorSketch UI Module

User interface components:
- MainWindow: Primary application window
- SketchCanvas: Drawing canvas wired to the interaction state machine
"""
