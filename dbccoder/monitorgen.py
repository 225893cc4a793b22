"""Generation of the frame-monitor header and source of a driver."""

from __future__ import annotations

from typing import Sequence

from .filewriter import FileWriter
from .fscreator import AppSettings
from .model import MessageDescriptor

_HEADER_NOTE = (
    "/*\n"
    "This file contains the prototypes of all the functions that will be called\n"
    "from each Unpack_*name* function to detect DBC related errors\n"
    "It is the user responsibility to defined these functions in the\n"
    "separated .c file. If it won't be done the linkage error will happen\n"
    "*/"
)

_SOURCE_NOTE = (
    "/*\n"
    "Put the monitor function content here, keep in mind -\n"
    "next generation will completely clear all manually added code (!)\n"
    "*/\n\n"
)


def fill_mon_header(
    writer: FileWriter, messages: Sequence[MessageDescriptor], settings: AppSettings
) -> None:
    """Write the frame-monitor header for *messages* into *writer*."""
    gen = settings.gen
    drv = gen.drvname

    if gen.start_info:
        writer.append(gen.start_info)

    writer.append("#pragma once")
    writer.blank()
    writer.append('#ifdef __cplusplus\nextern "C" {\n#endif')
    writer.blank()

    writer.append("// DBC file version")
    writer.append(f"#define {gen.verhigh_def}_FMON ({gen.hiver}U)")
    writer.append(f"#define {gen.verlow_def}_FMON ({gen.lowver}U)")
    writer.blank()

    writer.append(f"#include <{drv}.h>")
    writer.append(f"#include <{drv}-config.h>")
    writer.blank()

    writer.append(f"#ifdef {gen.usemon_def}")
    writer.blank()
    writer.append("#include <canmonitorutil.h>")
    writer.append(_HEADER_NOTE)
    writer.blank()

    writer.append(f"#ifdef {gen.drvname_upper}_USE_MONO_FMON")
    writer.blank()
    writer.append(f"void _FMon_MONO_{drv}(FrameMonitor_t* _mon, uint32_t msgid);")
    writer.append(f"void _TOut_MONO_{drv}(FrameMonitor_t* _mon, uint32_t msgid, uint32_t lastcyc);")
    writer.blank()

    for msg in messages:
        writer.append(f"#define FMon_{msg.name}_{drv}(x, y) _FMon_MONO_{drv}((x), (y))")
    writer.blank()
    for msg in messages:
        writer.append(f"#define TOut_{msg.name}_{drv}(x, y, z) _TOut_MONO_{drv}((x), (y), (z))")
    writer.blank()

    writer.append("#else")
    writer.blank()

    for msg in messages:
        writer.append(f"void _FMon_{msg.name}_{drv}(FrameMonitor_t* _mon, uint32_t msgid);")
    writer.blank()
    for msg in messages:
        writer.append(
            f"void _TOut_{msg.name}_{drv}(FrameMonitor_t* _mon, uint32_t msgid, uint32_t lastcyc);"
        )
    writer.blank()
    for msg in messages:
        writer.append(f"#define FMon_{msg.name}_{drv}(x, y) _FMon_{msg.name}_{drv}((x), (y))")
    writer.blank()
    for msg in messages:
        writer.append(
            f"#define TOut_{msg.name}_{drv}(x, y, z) _FMon_{msg.name}_{drv}((x), (y), (z))"
        )
    writer.blank()

    writer.append(f"#endif // {gen.drvname_upper}_USE_MONO_FMON")
    writer.blank()

    for msg in messages:
        writer.append(f"void FTrn_{msg.name}_{drv}({msg.name}_t* _m);")
    writer.blank()

    writer.append(f"#endif // {gen.usemon_def}")
    writer.blank()
    writer.append("#ifdef __cplusplus\n}\n#endif")


def fill_mon_source(
    writer: FileWriter, messages: Sequence[MessageDescriptor], settings: AppSettings
) -> None:
    """Write the weak default frame-monitor functions for *messages* into *writer*."""
    gen = settings.gen
    drv = gen.drvname

    if gen.start_info:
        writer.append(gen.start_info)

    writer.append(f"#include <{settings.file.fmon_h.fname}>")
    writer.blank()
    writer.append(f"#ifdef {gen.usemon_def}")
    writer.blank()
    writer.append(_SOURCE_NOTE)

    writer.append(f"#ifdef {gen.drvname_upper}_USE_MONO_FMON")
    writer.blank()
    writer.append("__attribute__((weak))")
    writer.append(
        f"void _FMon_MONO_{drv}(FrameMonitor_t* _mon, uint32_t msgid)\n"
        "{\n  (void)_mon;\n  (void)msgid;\n}\n\n"
    )
    writer.append("__attribute__((weak))")
    writer.append(
        f"void _TOut_MONO_{drv}(FrameMonitor_t* _mon, uint32_t msgid, uint32_t lastcyc)\n"
        "{\n  (void)_mon;\n  (void)msgid;\n  (void)lastcyc;\n}\n\n"
    )
    writer.append("#else")
    writer.blank()

    for msg in messages:
        writer.append("__attribute__((weak))")
        writer.append(
            f"void _FMon_{msg.name}_{drv}(FrameMonitor_t* _mon, uint32_t msgid)\n"
            "{\n  (void)_mon;\n  (void)msgid;\n}\n\n"
        )

    for msg in messages:
        writer.append("__attribute__((weak))")
        writer.append(
            f"void _TOut_{msg.name}_{drv}(FrameMonitor_t* _mon, uint32_t msgid, uint32_t lastcyc)\n"
            "{\n  (void)_mon;\n  (void)msgid;\n  (void)lastcyc;}\n\n"
        )

    writer.append(f"#endif // {gen.drvname_upper}_USE_MONO_FMON")
    writer.blank()

    for msg in messages:
        writer.append("__attribute__((weak))")
        writer.append(f"void FTrn_{msg.name}_{drv}({msg.name}_t* _m)\n{{\n  (void)_m;\n}}\n\n")

    writer.blank()
    writer.append(f"#endif // {gen.usemon_def}")