"""Parsing of single DBC lines (and multi-line records) into model objects."""

from __future__ import annotations

import functools
import math
import re
from typing import List, Optional, Tuple

from .formatter import make_c_name
from .model import (
    AttributeDescriptor,
    AttributeType,
    BitLayout,
    Comment,
    CommentTarget,
    MessageDescriptor,
    MultiplexType,
    SignalDescriptor,
    SigType,
    ValTable,
)

MIN_FAC_OFF = 0.000000001

_REG_MESSAGE = r"[^A-Za-z0-9_.-]"
_MESSAGE_LINE_START = "BO_ "
_REG_SIG_RECEIVERS = r"[^A-Za-z0-9_.+-]+"
_REG_SIG_SPLIT1 = r"(\s+:\s+)"
_REG_SIG_SPLIT2 = r"(\")"
_REG_COMM_MAIN = r"\""
_REG_COMM_META = r"[ ]+"
_REG_ATTR_MAIN = r"[^A-Za-z0-9_\.]+"
_REG_TRANSMITTERS = r"[^a-zA-Z_0-9]+"
_REG_VAL_TABLE = r"[^\s\"]+|\"([^\"]*)\""
_SIGNAL_MATCH = re.compile(r"\s+SG_", re.ASCII)

_TRIM_CHARS = "\t\n\v\f\r "

_MAX_UNSIGNED = (0xFF, 0xFFFF, 0xFFFFFFFF, 0xFFFFFFFFFFFFFFFF)
_MAX_SIGNED = (0x7F, 0x7FFF, 0x7FFFFFFF, 0x7FFFFFFFFFFFFFFF)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


@functools.lru_cache(maxsize=None)
def _compile(pattern: str) -> re.Pattern:
    return re.compile(pattern, re.ASCII)


def resplit(s: str, pattern: str, submatch: int) -> List[str]:
    """Split *s* by a regular expression.

    With *submatch* of -1 the text between matches is returned (an empty tail
    after the last match is dropped); with 0 the whole matches; with a
    positive value the given group of every match.
    """
    rx = _compile(pattern)
    if submatch >= 0:
        return [m.group(submatch) or "" for m in rx.finditer(s)]

    parts: List[str] = []
    pos = 0
    matched = False
    for m in rx.finditer(s):
        parts.append(s[pos : m.start()])
        pos = m.end()
        matched = True
    if not matched:
        return [s]
    if pos < len(s):
        parts.append(s[pos:])
    return parts


def _atoll(s: str) -> int:
    m = _INT_PREFIX.match(s)
    return int(m.group(1)) if m else 0


def _atof(s: str) -> float:
    m = _FLOAT_PREFIX.match(s)
    return float(m.group(1)) if m else 0.0


def _u32(value: int) -> int:
    return value & 0xFFFFFFFF


def _clear_msgid(msg_id: int) -> int:
    return msg_id & 0x1FFFFFFF


def _fdiv(a: float, b: float) -> float:
    """Floating division with IEEE results for a zero divisor."""
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    sign = math.copysign(1.0, a) * math.copysign(1.0, b)
    return math.copysign(math.inf, sign)


def _first_fit(value: int, limits: Tuple[int, ...], extra: int = 0) -> int:
    for i, limit in enumerate(limits):
        if value <= limit + extra:
            return i
    return len(limits) - 1


def _detect_sig_types(sig: SignalDescriptor) -> SigType:
    """Set type_ro and type_phys of *sig* from its width, sign and scaling."""
    if sig.signed:
        max_abs = int(2.0 ** (sig.length_bit - 1) - 1)
        min_abs = -(max_abs + 1)
        sig.type_ro = SigType(_first_fit(max_abs, _MAX_SIGNED))
    else:
        max_abs = int(2.0 ** sig.length_bit - 1)
        min_abs = 0
        sig.type_ro = SigType(_first_fit(max_abs, _MAX_UNSIGNED) + 4)

    if sig.is_simple_sig:
        sig.type_phys = sig.type_ro
    elif not sig.is_double_sig:
        i_offset = int(sig.offset)
        i_factor = int(sig.factor)
        max_abs = max_abs * i_factor + i_offset
        min_abs = min_abs * i_factor + i_offset

        if sig.signed or max_abs < 0 or min_abs < 0:
            max_v = abs(max_abs)
            addon = 0
            if max_v + 1 < abs(min_abs):
                addon = 1
                max_v = abs(min_abs)
            sig.type_phys = SigType(_first_fit(max_v, _MAX_SIGNED, addon))
        else:
            for i, limit in enumerate(_MAX_UNSIGNED):
                if max_abs <= limit:
                    sig.type_phys = SigType(i + 4)
                    break
    return sig.type_ro


class DbcLineParser:
    """Parses DBC lines; comment, attribute and value lines may span several lines."""

    def __init__(self) -> None:
        self._comment_line = ""
        self._attrib_line = ""
        self._value_line = ""

    def is_message_line(self, line: str) -> bool:
        """Tell whether *line* starts a message definition."""
        return line.startswith(_MESSAGE_LINE_START)

    def parse_message_line(self, line: str) -> Optional[MessageDescriptor]:
        """Parse a ``BO_`` line; return None when it is not a valid message."""
        items = resplit(line, _REG_MESSAGE, -1)
        if len(items) < 5:
            return None

        msg = MessageDescriptor()
        txname = items[5] if len(items) >= 6 else ""
        if len(txname) > 1:
            msg.transmitters.append(txname)

        msg.name = items[2]
        raw_id = _u32(_atoll(items[1]))
        msg.dlc = _atoll(items[4])

        if (raw_id & 0x60000000) != 0 or msg.dlc == 0 or msg.dlc > 8:
            return None

        msg.is_ext = ((raw_id >> 29) & 0x04) == 0x04
        msg.msg_id = _clear_msgid(raw_id)
        return msg

    def parse_multi_trans(self, line: str) -> Optional[Tuple[int, List[str]]]:
        """Parse a ``BO_TX_BU_`` line into (message id, transmitter names)."""
        chunks = resplit(line, _REG_TRANSMITTERS, -1)
        if len(chunks) >= 3 and chunks[0] == "BO_TX_BU_":
            msg_id = _clear_msgid(_u32(_atoll(chunks[1])))
            if msg_id != 0:
                return msg_id, chunks[2:]
        return None

    def is_signal_line(self, line: str) -> bool:
        """Tell whether *line* holds a signal definition."""
        return _SIGNAL_MATCH.search(line) is not None

    def parse_signal_line(self, line: str) -> Optional[SignalDescriptor]:
        """Parse a ``SG_`` line; return None when it cannot be parsed."""
        halfs = resplit(line, _REG_SIG_SPLIT1, -1)
        if len(halfs) < 2:
            return None

        tailpart = resplit(halfs[1], _REG_SIG_SPLIT2, -1)
        valpart = resplit(tailpart[0].strip(_TRIM_CHARS), _REG_SIG_RECEIVERS, -1)
        head = resplit(halfs[0], _REG_VAL_TABLE, 0)

        if len(head) < 2:
            return None

        sig = SignalDescriptor(name=head[1])
        if len(head) == 3:
            sig.multiplex = MultiplexType.MASTER if head[2] == "M" else MultiplexType.MUL_VALUE

        if len(valpart) < 7:
            return None

        sig.start_bit = _atoll(valpart[0])
        sig.length_bit = _atoll(valpart[1])

        fac_text, off_text = valpart[3], valpart[4]
        sig.is_double_sig = any(ch in fac_text or ch in off_text for ch in ".Ee")

        sig.factor = _atof(fac_text)
        sig.offset = _atof(off_text)

        if (abs(sig.factor) < MIN_FAC_OFF and sig.factor != 0.0) or (
            abs(sig.offset) < MIN_FAC_OFF and sig.offset != 0.0
        ):
            # values this small are not supported: treat as a plain integer
            sig.factor = 1.0
            sig.offset = 0.0
            sig.is_double_sig = False

        sig.raw_offset = _fdiv(sig.offset, sig.factor)
        sig.min_value = _atof(valpart[5])
        sig.max_value = _atof(valpart[6])

        sig.order = BitLayout.INTEL if "1" in valpart[2] else BitLayout.MOTOROLA
        sig.signed = "-" in valpart[2]

        _detect_sig_types(sig)

        if not sig.is_double_sig and sig.factor == 1 and sig.offset == 0:
            sig.is_simple_sig = True

        if not sig.is_simple_sig:
            sig.name_float = sig.name + "_phys"
            sig.name += "_ro"

        if len(tailpart) != 3:
            return None

        sig.unit = tailpart[1]
        sig.receivers.extend(resplit(tailpart[2].strip(_TRIM_CHARS), _REG_SIG_RECEIVERS, -1))
        return sig

    def parse_comment_line(self, line: str) -> Optional[Comment]:
        """Feed one line of a ``CM_`` record; return the comment once it is complete."""
        if not line:
            return None

        if line.startswith("CM_"):
            self._comment_line = line
        elif self._comment_line:
            self._comment_line += "\n" + line

        if not (self._comment_line and line.endswith(";")):
            return None

        record, self._comment_line = self._comment_line, ""
        items = resplit(record, _REG_COMM_MAIN, -1)
        if len(items) != 3:
            return None

        cm = Comment()
        meta = resplit(items[0], _REG_COMM_META, -1)
        if len(meta) >= 3:
            cm.msg_id = _clear_msgid(_u32(_atoll(meta[2])))
            if meta[1] == "SG_" and len(meta) == 4:
                cm.ca_target = CommentTarget.SIGNAL
                cm.sig_name = meta[3]
            elif meta[1] == "BO_":
                cm.ca_target = CommentTarget.MESSAGE
            cm.text = items[1]

        if cm.text.endswith("\n"):
            cm.text = cm.text[:-1]
        return cm

    def parse_attribute_line(self, line: str) -> Optional[AttributeDescriptor]:
        """Feed one line of a ``BA_`` record; return a cycle-time attribute when complete."""
        if not line:
            return None

        if line.startswith("BA_ "):
            self._attrib_line = line
        elif self._attrib_line:
            self._attrib_line += line

        if not (self._attrib_line and line.endswith(";")):
            return None

        record, self._attrib_line = self._attrib_line, ""
        items = resplit(record, _REG_ATTR_MAIN, -1)
        if len(items) > 4 and items[1] == "GenMsgCycleTime" and items[2] == "BO_":
            return AttributeDescriptor(
                type=AttributeType.CYCLE_TIME,
                msg_id=_clear_msgid(_u32(_atoll(items[3]))),
                value=_atoll(items[4]),
            )
        return None

    def parse_val_table_line(self, line: str) -> Optional[Tuple[Comment, ValTable]]:
        """Feed one line of a ``VAL_`` record; return its comment and value table when complete."""
        if not line:
            return None

        if line.startswith("VAL_ "):
            self._value_line = line
        elif self._value_line:
            self._value_line += line

        if not (self._value_line and line.endswith(";")):
            return None

        record, self._value_line = self._value_line, ""
        items = resplit(record, _REG_VAL_TABLE, 0)
        if not (len(items) >= 3 and items[-1] == ";" and len(items) % 2 == 0):
            return None

        cm = Comment(
            msg_id=_clear_msgid(_u32(_atoll(items[1]))),
            sig_name=items[2],
            ca_target=CommentTarget.SIGNAL,
        )
        vtab = ValTable(sig_name=items[2])
        lines = []
        for value, description in zip(items[3:-1:2], items[4:-1:2]):
            lines.append(f" {value} : {description}")
            vtab.vpairs.append((make_c_name(description), _u32(_atoll(value))))
        cm.text = "\n".join(lines)
        return cm, vtab