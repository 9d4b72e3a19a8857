from .validator import validate_wordlist, validate_chain, pretty_summary
from .io import read_lines, write_lines
from .vocabulary import load_vocabulary, split_by_length
from .daily import DayChains, DailyChainSource, load_daily_chains

__all__ = [
    "validate_wordlist", "validate_chain", "pretty_summary", "read_lines", "write_lines",
    "load_vocabulary", "split_by_length", "DayChains", "DailyChainSource", "load_daily_chains",
]
