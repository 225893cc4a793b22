"""Scanning of a whole DBC text into a list of messages."""

from __future__ import annotations

import re
from typing import IO, List, Optional, Union

from .formatter import str_trim
from .lineparser import DbcLineParser, resplit
from .model import (
    AttributeType,
    BitLayout,
    CommentTarget,
    DbcMessageList,
    MessageDescriptor,
    ValTable,
)

_CHECKSUM_SPLIT = r"(\:)"
_VERSION_MARKER = re.compile(r"\s*(\S{1,8})")
_VERSION_NUMBERS = re.compile(r'\s*"\s*\+?(\d+)\.\s*\+?(\d+)"')
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _atoi(s: str) -> int:
    m = _INT_PREFIX.match(s)
    return int(m.group(1)) if m else 0


def find_message(msgs: List[MessageDescriptor], msg_id: int) -> Optional[MessageDescriptor]:
    """Return the message with *msg_id*.

    When no message matches, the last message of the list is returned;
    an empty list gives None.
    """
    if not msgs:
        return None
    for msg in msgs:
        if msg.msg_id == msg_id:
            return msg
    return msgs[-1]


class DbcScanner:
    """Reads DBC text and collects its messages, signals and attributes."""

    def __init__(self) -> None:
        self.dblist = DbcMessageList()
        self._parser = DbcLineParser()

    def trim_dbc_text(self, source: Union[str, IO[str]]) -> DbcMessageList:
        """Scan DBC text (a string or a text stream) and return the message list."""
        text = source if isinstance(source, str) else source.read()
        lines = [str_trim(line) for line in text.split("\n")]

        self.dblist = DbcMessageList()
        self._parse_message_info(lines)
        self._parse_other_info(lines)
        return self.dblist

    def _parse_message_info(self, lines: List[str]) -> None:
        pending: Optional[MessageDescriptor] = None

        for line in lines:
            self._find_version(line)

            if self._parser.is_message_line(line):
                self._add_message(pending)
                pending = self._parser.parse_message_line(line)

            if pending is not None and self._parser.is_signal_line(line):
                sig = self._parser.parse_signal_line(line)
                if sig is not None:
                    pending.signals.append(sig)
                    if sig.is_double_sig or not sig.is_simple_sig:
                        pending.has_phys = True

            multi = self._parser.parse_multi_trans(line)
            if multi is not None:
                # no more signals can follow: close the pending message
                self._add_message(pending)
                pending = None

                msg_id, tx_nodes = multi
                msg = find_message(self.dblist.msgs, msg_id)
                if msg is not None:
                    for node in tx_nodes:
                        if node not in msg.transmitters:
                            msg.transmitters.append(node)

        self._add_message(pending)

    def _parse_other_info(self, lines: List[str]) -> None:
        for line in lines:
            cm = self._parser.parse_comment_line(line)
            if cm is not None:
                msg = find_message(self.dblist.msgs, cm.msg_id)
                if msg is not None:
                    if cm.ca_target is CommentTarget.MESSAGE:
                        msg.comment_text = cm.text
                    elif cm.ca_target is CommentTarget.SIGNAL:
                        self._apply_signal_comment(msg, cm.sig_name, cm.text)

            vt = self._parser.parse_val_table_line(line)
            if vt is not None:
                cm, vals = vt
                msg = find_message(self.dblist.msgs, cm.msg_id)
                if msg is not None:
                    if cm.ca_target is CommentTarget.MESSAGE:
                        msg.comment_text = cm.text
                    elif cm.ca_target is CommentTarget.SIGNAL:
                        for sig in msg.signals:
                            if sig.name == cm.sig_name:
                                sig.value_text = cm.text
                                sig.val_defs = ValTable(vals.sig_name, list(vals.vpairs))

            attr = self._parser.parse_attribute_line(line)
            if attr is not None:
                msg = find_message(self.dblist.msgs, attr.msg_id)
                if msg is not None and attr.type is AttributeType.CYCLE_TIME:
                    msg.cycle = attr.value

    @staticmethod
    def _apply_signal_comment(msg: MessageDescriptor, sig_name: str, text: str) -> None:
        for sig in msg.signals:
            if sig.name != sig_name:
                continue
            sig.comment_text = text

            if "<RollingCounter>" in text:
                msg.roll_sig = sig

            openpos = text.find("<")
            if openpos < 0:
                continue
            closepos = text.find(">", openpos)
            if closepos < 0 or closepos <= openpos + 1:
                continue

            start = openpos + 1
            meta = resplit(text[start : start + closepos - 1], _CHECKSUM_SPLIT, -1)
            if len(meta) != 3 or meta[0] != "Checksum":
                continue

            if sig.order is BitLayout.INTEL:
                last_bit = sig.start_bit + sig.length_bit - 1
            else:
                last_bit = sig.start_bit - sig.length_bit + 1
            boundary_ok = sig.start_bit // 8 == last_bit // 8

            if sig.is_simple_sig and boundary_ok and not sig.signed:
                msg.csm_sig = sig
                msg.csm_method = meta[1]
                msg.csm_op = _atoi(meta[2])

    def _add_message(self, message: Optional[MessageDescriptor]) -> None:
        if message is None:
            return
        message.signals.sort(key=lambda s: s.start_bit)
        for sig in message.signals:
            for node in sig.receivers:
                if node not in message.receivers:
                    message.receivers.append(node)
        self.dblist.msgs.append(message)

    def _find_version(self, line: str) -> None:
        """Pick up a line of the form: VERSION "x.y"."""
        if line[:1] != "V" and line[1:2] != "E":
            return
        marker = _VERSION_MARKER.match(line)
        if marker is None or marker.group(1) != "VERSION":
            return
        numbers = _VERSION_NUMBERS.match(line, marker.end())
        if numbers is None:
            return
        self.dblist.ver_hi = int(numbers.group(1)) & 0xFFFFFFFF
        self.dblist.ver_low = int(numbers.group(2)) & 0xFFFFFFFF