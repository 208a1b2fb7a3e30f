"""
Data models for the Photo Print Station.

This module contains dataclasses for:
- CapabilityOption / OptionChoice: One printer's advertised options
- PrintRequest: Validated, immutable capture to print
- GraySelection: Option/value pair chosen to force monochrome
- PrintResult: Outcome of one print attempt
- PrinterInfo: A printer registered with the OS

PrintRequest, GraySelection and the capability models are frozen, so they
can be passed between the HTTP thread and the print attempt without copies.
"""

from .capability import CapabilityOption, OptionChoice
from .print_request import PrintRequest
from .print_result import GraySelection, PrintResult, PrinterInfo

__all__ = [
    # Capability models
    "CapabilityOption",
    "OptionChoice",
    # Request models
    "PrintRequest",
    # Result models
    "GraySelection",
    "PrintResult",
    "PrinterInfo",
]
