"""
typeshape: render resolved type schemas into target-language source code.
"""

__version__ = "0.1.0"
