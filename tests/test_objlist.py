import pytest

from drillbook.objlist import sorted_names, tokenize_names

COMMANDS = (
    " qprompt \n"
    " qstatp\n"
    " qalter \n"
    " qchk qdel \n"
    " qdev \n"
    " qhold \n"
    " qlimit \n"
    " qmsg \n"
    " qpr \n"
    " qrerun \n"
    " qmove \n"
    " qrls\n"
    " qrsm \n"
    " qrst \n"
    " qspnd \n"
    " qstat \n"
    " qstata \n"
    " qstatc \n"
    " qstatck \n"
    " qstatd \n"
    " qstatf \n"
    " qstatq\n"
    " qstatr \n"
    " qstatx \n"
    " qsub \n"
    " qwait \n"
    " qwatch \n"
    " qcat\n"
    " qmgr \n"
    " nmapmgr \n"
    " genevent \n"
    " jnwwatch"
)

OBJECTS = (
    "_ns_nwlcs.o apicmlib.o ctimezone.o\\\n"
    "\tproc.o daestat.o portkeeper.o \\\n"
    "\tnqslcsfile.o nqslcsgen.o \\"
)


def test_tokenize_keeps_order():
    names = tokenize_names(COMMANDS)
    assert names[0] == "qprompt"
    assert names[-1] == "jnwwatch"


def test_continuations_are_dropped():
    names = tokenize_names(OBJECTS)
    assert names == [
        "_ns_nwlcs.o",
        "apicmlib.o",
        "ctimezone.o",
        "proc.o",
        "daestat.o",
        "portkeeper.o",
        "nqslcsfile.o",
        "nqslcsgen.o",
    ]
    assert all("\\" not in name for name in names)


def test_sorted_names_is_sorted_permutation():
    names = sorted_names(COMMANDS)
    assert names == sorted(names)
    assert sorted(tokenize_names(COMMANDS)) == names
    assert names[0] == "genevent"


def test_sorted_underscore_before_lowercase():
    names = sorted_names(OBJECTS)
    assert names[0] == "_ns_nwlcs.o"
    assert names[-1] == "proc.o"


@pytest.mark.parametrize("text", ["", "   \n\t", "\\\n\\"])
def test_blank_text_has_no_names(text):
    assert tokenize_names(text) == []
    assert sorted_names(text) == []