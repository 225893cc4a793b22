from dbccoder.options import GenOptions, parse_options


def test_basic_arguments():
    ret = parse_options(
        [
            "appname",
            "-out",
            "path/to/out",
            "-dbc",
            "path/to/test.dbc",
            "-drvname",
            "testdbc",
            "-rw",
        ]
    )
    assert ret.dbc == "path/to/test.dbc"
    assert ret.outdir == "path/to/out"
    assert ret.drvname == "testdbc"
    assert ret.is_rewrite is True
    assert ret.is_help is False
    assert ret.is_noconfig is False
    assert ret.is_nodeutils is False
    assert ret.is_nofmon is False
    assert ret.is_nocanmon is False


def test_no_arguments_gives_defaults():
    assert parse_options(["appname"]) == GenOptions()


def test_all_flags():
    ret = parse_options(
        ["app", "-nodeutils", "-help", "-noinc", "-noconfig", "-nofmon"]
    )
    assert ret.is_nodeutils
    assert ret.is_help
    assert ret.is_nocanmon
    assert ret.is_noconfig
    assert ret.is_nofmon
    assert not ret.is_rewrite


def test_key_without_value_is_set_empty():
    ret = parse_options(["app", "-dbc", "-rw"])
    assert ret.dbc == ""
    assert ret.is_rewrite


def test_drvname_made_c_name():
    ret = parse_options(["app", "-drvname", "1my drv"])
    assert ret.drvname == "my_drv"


def test_drvname_invalid_is_unset():
    ret = parse_options(["app", "-drvname", "123"])
    assert ret.drvname is None


def test_extra_positional_ignored():
    ret = parse_options(["app", "-out", "dir", "stray", "-dbc", "f.dbc"])
    assert ret.outdir == "dir"
    assert ret.dbc == "f.dbc"


def test_later_key_overrides():
    ret = parse_options(["app", "-out", "a", "-out", "b"])
    assert ret.outdir == "b"


def test_unknown_keys_ignored():
    ret = parse_options(["app", "-unknown", "v", "-rw"])
    assert ret == GenOptions(is_rewrite=True)