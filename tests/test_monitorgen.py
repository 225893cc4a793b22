import pytest

from dbccoder.filewriter import FileWriter
from dbccoder.fscreator import FsCreator
from dbccoder.model import MessageDescriptor
from dbccoder.monitorgen import fill_mon_header, fill_mon_source

NAMES = ["UTEST_2", "EMPTY_0", "UTEST_3", "FLT_TEST_1", "SIG_TEST_1", "EMPTY_EXT_ID"]


def _settings(info=""):
    creator = FsCreator()
    creator.configure("testdb", "out", info, 1, 10)
    return creator.settings


@pytest.fixture
def messages():
    return [MessageDescriptor(name=n) for n in NAMES]


def _header(messages, info=""):
    writer = FileWriter()
    fill_mon_header(writer, messages, _settings(info))
    return writer.getvalue()


def _source(messages, info=""):
    writer = FileWriter()
    fill_mon_source(writer, messages, _settings(info))
    return writer.getvalue()


def test_header_version_and_guards(messages):
    lines = _header(messages).splitlines()
    assert lines[0] == "#pragma once"
    assert "#define VER_TESTDB_MAJ_FMON (1U)" in lines
    assert "#define VER_TESTDB_MIN_FMON (10U)" in lines
    assert "#ifdef TESTDB_USE_DIAG_MONITORS" in lines
    assert "#ifdef TESTDB_USE_MONO_FMON" in lines
    assert "#include <canmonitorutil.h>" in lines


def test_header_mono_defines_in_order(messages):
    text = _header(messages)
    mono = [f"#define FMon_{n}_testdb(x, y) _FMon_MONO_testdb((x), (y))" for n in NAMES]
    positions = [text.index(line) for line in mono]
    assert positions == sorted(positions)


def test_header_per_frame_prototypes(messages):
    lines = _header(messages).splitlines()
    for n in NAMES:
        assert f"void _FMon_{n}_testdb(FrameMonitor_t* _mon, uint32_t msgid);" in lines
        assert f"#define FMon_{n}_testdb(x, y) _FMon_{n}_testdb((x), (y))" in lines


def test_header_ends_with_cplusplus_guard(messages):
    assert _header(messages).endswith("#ifdef __cplusplus\n}\n#endif\n")


def test_header_start_info_first(messages):
    text = _header(messages, info="// generated")
    assert text.startswith("// generated\n#pragma once\n")


def test_header_without_messages_has_no_frame_lines():
    text = _header([])
    assert "_FMon_MONO_testdb(FrameMonitor_t* _mon, uint32_t msgid);" in text
    assert "FTrn_" not in text


def test_source_frame_functions(messages):
    text = _source(messages)
    assert text.startswith("#include <testdb-fmon.h>\n")
    for n in NAMES:
        body = (
            f"void _FMon_{n}_testdb(FrameMonitor_t* _mon, uint32_t msgid)\n"
            "{\n  (void)_mon;\n  (void)msgid;\n}"
        )
        assert body in text
    assert text.count("__attribute__((weak))") == 2 + 3 * len(NAMES)


def test_source_ends_with_monitor_guard(messages):
    assert _source(messages).endswith("#endif // TESTDB_USE_DIAG_MONITORS\n")


def test_source_start_info(messages):
    assert _source(messages, info="// info").startswith("// info\n#include <testdb-fmon.h>\n")