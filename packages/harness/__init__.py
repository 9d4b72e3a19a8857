from .core import run_case, run_batch, summarize
from .io import write_csv, write_chains, write_manifest

__all__ = ["run_case", "run_batch", "summarize", "write_csv", "write_chains", "write_manifest"]
