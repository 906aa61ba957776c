from .codec import PROTOCOL_VERSION, MessageSizer, encode
from .models import MessageSize, SentMessage
from .simulator import SimulatedSmsgNetwork, estimate_fee

__all__ = [
    "MessageSize",
    "MessageSizer",
    "PROTOCOL_VERSION",
    "SentMessage",
    "SimulatedSmsgNetwork",
    "encode",
    "estimate_fee",
]
