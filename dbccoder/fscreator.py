"""Paths, file names and common defines used while generating a driver."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from .formatter import str_tolower, str_toupper

_LIB_DIR = "/lib"
_USR_DIR = "/usr"
_INC_DIR = "/inc"
_CONF_DIR = "/conf"
_UTIL_DIR = "/butl"


@dataclass
class OutFileDescriptor:
    """Location of one generated file."""

    dir: str = ""
    fname: str = ""
    fpath: str = ""


@dataclass
class FsDescriptor:
    """Output directories and generated files."""

    libdir: str = ""
    usrdir: str = ""
    incdir: str = ""
    confdir: str = ""
    utildir: str = ""
    core_h: OutFileDescriptor = field(default_factory=OutFileDescriptor)
    core_c: OutFileDescriptor = field(default_factory=OutFileDescriptor)
    util_h: OutFileDescriptor = field(default_factory=OutFileDescriptor)
    util_c: OutFileDescriptor = field(default_factory=OutFileDescriptor)
    fmon_h: OutFileDescriptor = field(default_factory=OutFileDescriptor)
    fmon_c: OutFileDescriptor = field(default_factory=OutFileDescriptor)


@dataclass
class GenDescriptor:
    """Driver names and the macro names used in generated code."""

    drvname_orig: str = ""
    drvname: str = ""
    drvname_upper: str = ""
    usebits_def: str = ""
    usestruct_def: str = ""
    usemon_def: str = ""
    usemonofmon_def: str = ""
    usesigfloat_def: str = ""
    useroll_def: str = ""
    usecsm_def: str = ""
    verhigh_def: str = ""
    verlow_def: str = ""
    start_info: str = ""
    hiver: int = 0
    lowver: int = 0
    no_fmon: bool = False
    no_inc: bool = False
    no_config: bool = False


@dataclass
class AppSettings:
    """File layout and generation settings together."""

    file: FsDescriptor = field(default_factory=FsDescriptor)
    gen: GenDescriptor = field(default_factory=GenDescriptor)


def _mkdir(path: str) -> bool:
    """Create one directory; return False if it already exists."""
    try:
        os.mkdir(path)
    except FileExistsError:
        return False
    return True


class FsCreator:
    """Builds the paths, names and defines needed for code generation."""

    def __init__(self) -> None:
        self.settings = AppSettings()

    def configure(self, drvname: str, outpath: str, info: str, hiver: int, lowver: int) -> None:
        """Fill the settings for driver *drvname* generated into *outpath*."""
        fs = self.settings.file
        gen = self.settings.gen

        fs.libdir = outpath + _LIB_DIR
        fs.usrdir = outpath + _USR_DIR
        fs.incdir = outpath + _INC_DIR
        fs.confdir = outpath + _CONF_DIR
        fs.utildir = outpath + _UTIL_DIR

        gen.drvname_orig = drvname
        gen.drvname_upper = str_toupper(drvname)
        gen.drvname = str_tolower(drvname)
        low = gen.drvname

        def describe(fname: str, directory: str) -> OutFileDescriptor:
            return OutFileDescriptor(dir=outpath, fname=fname, fpath=directory + "/" + fname)

        fs.core_h = describe(low + ".h", fs.libdir)
        fs.core_c = describe(low + ".c", fs.libdir)
        fs.util_h = describe(low + "-binutil.h", fs.utildir)
        fs.util_c = describe(low + "-binutil.c", fs.utildir)
        fs.fmon_h = describe(low + "-fmon.h", fs.libdir)
        fs.fmon_c = describe(low + "-fmon.c", fs.usrdir)

        up = gen.drvname_upper
        gen.usebits_def = f"{up}_USE_BITS_SIGNAL"
        gen.usemon_def = f"{up}_USE_DIAG_MONITORS"
        gen.usemonofmon_def = f"{up}_USE_MONO_FMON"
        gen.usesigfloat_def = f"{up}_USE_SIGFLOAT"
        gen.usestruct_def = f"{up}_USE_CANSTRUCT"
        gen.useroll_def = f"{up}_AUTO_ROLL"
        gen.usecsm_def = f"{up}_AUTO_CSM"
        gen.verhigh_def = f"VER_{up}_MAJ"
        gen.verlow_def = f"VER_{up}_MIN"

        gen.start_info = info
        gen.hiver = hiver
        gen.lowver = lowver

    def prepare_directory(self, rw: bool) -> bool:
        """Create the output directory tree.

        With *rw* the output directory itself is used; otherwise the first
        free numbered subdirectory (000..999) is created in it. Returns
        whether a working directory was made available.
        """
        fs = self.settings.file
        basepath = fs.core_h.dir
        ok = False

        if rw:
            ok = True
            if not os.path.exists(basepath):
                ok = _mkdir(basepath)
        else:
            separator = "" if basepath.endswith("/") else "/"
            for dirnum in range(1000):
                work_dir = f"{basepath}{separator}{dirnum:03d}"
                if os.path.exists(work_dir):
                    continue
                if _mkdir(work_dir):
                    ok = True
                    break

        for path in (fs.libdir, fs.usrdir, fs.incdir, fs.confdir, fs.utildir):
            _mkdir(path)
        return ok

    def create_subdir(self, basepath: str, sub: str, rw: bool = True) -> Optional[str]:
        """Join *sub* to *basepath* and create that directory.

        Returns the joined path, or None when a name is empty or, with *rw*,
        the directory does not exist yet.
        """
        if not basepath or not sub:
            return None
        path = basepath if basepath.endswith("/") else basepath + "/"
        path += sub

        if rw and not os.path.exists(path):
            return None

        if not os.path.isdir(path):
            os.mkdir(path)
        return path