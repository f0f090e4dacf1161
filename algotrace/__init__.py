"""Algorithm step-trace generator with per-language source line highlights."""

from .api import (  # noqa: F401
    list_algorithms,
    generate_trace,
    annotate_trace,
    dump_trace,
)
