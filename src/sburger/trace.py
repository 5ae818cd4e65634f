"""
Trace recording and pretty printing for sBurger-256 block operations.

Contains:
- TraceRecorder: in-memory records, JSON Lines file output, compact verbose
- print_header / print_result: shared formatting helpers
"""

import json
from typing import Any, TextIO

from .utils import bytes_to_hex, format_block


class TraceRecorder:
    """
    Records and outputs traces of block transformations.

    Supports:
    - JSON Lines file output  (always, when trace_file is set)
    - Compact verbose stdout  (one line per block or byte event)
    """

    def __init__(self, verbose: bool = False, trace_file: TextIO | None = None):
        self.verbose = verbose
        self.trace_file = trace_file
        self._records: list[dict[str, Any]] = []

    def record(self, **kwargs) -> None:
        """Record a trace entry."""
        self._records.append(kwargs)

        if self.trace_file:
            self._write_jsonl(kwargs)

        if self.verbose:
            self._print_verbose(kwargs)

    def _write_jsonl(self, record: dict[str, Any]) -> None:
        serializable = self._make_serializable(record)
        self.trace_file.write(json.dumps(serializable) + "\n")
        self.trace_file.flush()

    def _make_serializable(self, obj: Any) -> Any:
        if isinstance(obj, dict):
            return {k: self._make_serializable(v) for k, v in obj.items()}
        elif isinstance(obj, (list, tuple)):
            return [self._make_serializable(item) for item in obj]
        elif isinstance(obj, (bytes, bytearray)):
            return bytes_to_hex(obj)
        else:
            return obj

    def _print_verbose(self, record: dict[str, Any]) -> None:
        direction = record.get("direction", "?")
        operation = record.get("operation", "unknown")
        tag = "ENC" if direction == "encrypt" else "DEC"

        if "block" in record:
            print(f"{tag} ----  {operation:20s} BLOCK:{format_block(record['block'])}")
        elif "value" in record:
            index = record.get("index", 0)
            print(f"{tag} B{index:02d}   {operation:20s} VALUE:{record['value']:02x}")

    def get_records(self) -> list[dict[str, Any]]:
        return list(self._records)

    def clear(self) -> None:
        self._records.clear()


# ------------------------------------------------------------------
# Shared formatting functions
# ------------------------------------------------------------------

def print_header(title: str) -> None:
    """Print a section header."""
    print(f"\n{'#'*70}")
    print(f"# {title}")
    print(f"{'#'*70}")


def print_result(label: str, output_hex: str, steps: int,
                 passed: bool | None = None) -> None:
    """Print final block result."""
    print(f"\n{'='*70}")
    print("RESULT")
    print(f"{'='*70}")
    print(f"{label}: {output_hex}")
    print(f"Active byte steps: {steps}")

    if passed is not None:
        status = "PASS" if passed else "FAIL"
        marker = "[OK]" if passed else "[ERROR]"
        print(f"Round trip: {marker} {status}")
    print(f"{'='*70}")
