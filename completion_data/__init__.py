from .builder import CompletionDataBuilder, build_completion_record, build_completion_records
from .config import Config, disable_extra_space, enable_extra_space
from .model import Chunk, ChunkKind, CompletionCandidate, CompletionKind, CompletionRecord

__all__ = [
    "Chunk",
    "ChunkKind",
    "CompletionCandidate",
    "CompletionDataBuilder",
    "CompletionKind",
    "CompletionRecord",
    "Config",
    "build_completion_record",
    "build_completion_records",
    "disable_extra_space",
    "enable_extra_space",
]
