"""Data model of a parsed DBC matrix: messages, signals and helper records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional, Tuple


class BitLayout(Enum):
    """Byte order of a signal in the payload."""

    INTEL = "intel"
    MOTOROLA = "motorola"


class MultiplexType(Enum):
    """Role of a signal in a multiplexed message."""

    NONE = "none"
    MASTER = "master"
    MUL_VALUE = "mul_value"


class SigType(IntEnum):
    """C integer type of a signal field; the value is the type id."""

    I8 = 0
    I16 = 1
    I32 = 2
    I64 = 3
    U8 = 4
    U16 = 5
    U32 = 6
    U64 = 7


class CommentTarget(Enum):
    """Object a comment line refers to."""

    UNDEFINED = "undefined"
    MESSAGE = "message"
    SIGNAL = "signal"


class AttributeType(Enum):
    """Kind of a recognised attribute line."""

    UNDEFINED = "undefined"
    CYCLE_TIME = "cycle_time"


@dataclass
class ValTable:
    """Named values of one signal: (identifier, raw value) pairs."""

    sig_name: str = ""
    vpairs: List[Tuple[str, int]] = field(default_factory=list)


@dataclass
class SignalDescriptor:
    """One signal of a CAN message."""

    name: str = ""
    name_float: str = ""
    multiplex: MultiplexType = MultiplexType.NONE
    start_bit: int = 0
    length_bit: int = 0
    is_double_sig: bool = False
    is_simple_sig: bool = False
    factor: float = 1.0
    offset: float = 0.0
    raw_offset: float = 0.0
    min_value: float = 0.0
    max_value: float = 0.0
    order: BitLayout = BitLayout.INTEL
    signed: bool = False
    type_ro: SigType = SigType.U64
    type_phys: SigType = SigType.U64
    unit: str = ""
    receivers: List[str] = field(default_factory=list)
    comment_text: str = ""
    value_text: str = ""
    val_defs: ValTable = field(default_factory=ValTable)


@dataclass
class MessageDescriptor:
    """One CAN message with its signals."""

    name: str = ""
    msg_id: int = 0
    is_ext: bool = False
    dlc: int = 0
    cycle: int = 0
    transmitters: List[str] = field(default_factory=list)
    receivers: List[str] = field(default_factory=list)
    signals: List[SignalDescriptor] = field(default_factory=list)
    comment_text: str = ""
    has_phys: bool = False
    roll_sig: Optional[SignalDescriptor] = None
    csm_sig: Optional[SignalDescriptor] = None
    csm_method: str = ""
    csm_op: int = 0
    csm_to_byte_expr: str = ""


@dataclass
class Comment:
    """A comment (or value description) attached to a message or signal."""

    msg_id: int = 0
    sig_name: str = ""
    text: str = ""
    ca_target: CommentTarget = CommentTarget.UNDEFINED


@dataclass
class AttributeDescriptor:
    """A recognised attribute value of a message."""

    type: AttributeType = AttributeType.UNDEFINED
    msg_id: int = 0
    value: int = 0


@dataclass
class DbcMessageList:
    """All messages of a matrix and the matrix version."""

    msgs: List[MessageDescriptor] = field(default_factory=list)
    ver_hi: int = 0
    ver_low: int = 0