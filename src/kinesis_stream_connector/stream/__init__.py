from .initial_position import DEFAULT_INITIAL_POSITION, InitialStreamPosition
from .stream_record import StreamRecord
from .record_decoder import DefaultRecordDecoder, RecordDecoder

__all__ = [
    "InitialStreamPosition",
    "DEFAULT_INITIAL_POSITION",
    "StreamRecord",
    "RecordDecoder",
    "DefaultRecordDecoder",
]
