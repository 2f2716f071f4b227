"""
Validation Kernel

Pure, side-effect-free value matchers that report problems as data:
- Decimal number matching with digit-count limits
- Immutable validation results with machine-readable error codes
- Structured JSON logging
"""

__version__ = "0.1.0"
