import pytest

from shlex import split

from daubechies_filters.string_formatters import Coefficient

from daubechies_filters.scripts.daubechies_filter_viewer import (
    parse_args,
    format_interior,
    format_boundary,
    main,
)


class TestParseArgs(object):
    def test_defaults(self):
        args = parse_args(split("interior 4"))
        assert args.kind == "interior"
        assert args.p == 4
        assert args.standard is False
        assert args.side == "L"
        assert args.member is None
        assert args.digits == 12
        assert args.verbose == 0

    def test_boundary_options(self):
        args = parse_args(split("boundary 3 --side R --member 2 -d 5 -vv"))
        assert args.kind == "boundary"
        assert args.p == 3
        assert args.side == "R"
        assert args.member == 2
        assert args.digits == 5
        assert args.verbose == 2

    @pytest.mark.parametrize(
        "arg_string",
        [
            # Missing arguments
            "",
            "interior",
            # Unknown kind
            "wavelet 2",
            # Non-integer order
            "interior two",
            # Unknown side
            "boundary 2 --side X",
            # Too few digits
            "interior 2 --digits 0",
            # Options for the wrong kind of filter
            "interior 2 --member 1",
            "boundary 2 --standard",
        ],
    )
    def test_invalid(self, arg_string, capsys):
        with pytest.raises(SystemExit):
            parse_args(split(arg_string))
        assert "error:" in capsys.readouterr().err


class TestFormatInterior(object):
    def test_symmlet(self):
        lines = format_interior(2, True, Coefficient(3)).splitlines()
        assert lines == [
            "Interior filter for Daubechies 2 (symmlet) on [-1, 2]:",
            "  -1:  4.83e-01",
            "   0:  8.37e-01",
            "   1:  2.24e-01",
            "   2: -1.29e-01",
        ]

    def test_standard(self):
        lines = format_interior(2, False, Coefficient(3)).splitlines()
        assert lines[0] == "Interior filter for Daubechies 2 (standard) on [0, 3]:"
        assert lines[1] == "  0:  4.83e-01"
        assert len(lines) == 5

    def test_untabulated_symmlet_shown_as_standard(self):
        lines = format_interior(10, True, Coefficient(3)).splitlines()
        assert lines[0] == "Interior filter for Daubechies 10 (standard) on [0, 19]:"
        assert len(lines) == 21


class TestFormatBoundary(object):
    def test_all_members(self):
        lines = format_boundary(2, "L", None, Coefficient(3)).splitlines()
        assert lines[0] == "Left boundary filters for Daubechies 2 on [0, 3]:"
        assert lines[1] == "  k = 0 (scaling function supported on [0, 2]):"
        assert lines[2:5] == [
            "    0:  6.03e-01",
            "    1:  6.91e-01",
            "    2: -3.98e-01",
        ]
        assert lines[6] == "  k = 1 (scaling function supported on [0, 3]):"
        assert len(lines) == 12

    def test_single_member(self):
        lines = format_boundary(2, "R", 1, Coefficient(3)).splitlines()
        assert lines[0] == "Right boundary filters for Daubechies 2 on [-3, 0]:"
        assert lines[1] == "  k = 1 (scaling function supported on [-3, 0]):"
        assert len(lines) == 7


class TestMain(object):
    def test_interior(self, capsys):
        assert main(split("interior 2")) == 0
        out, err = capsys.readouterr()
        assert out.splitlines()[1] == "  -1:  4.82962913145e-01"
        assert err == ""

    def test_boundary(self, capsys):
        assert main(split("boundary 3 --side R --member 0 --digits 4")) == 0
        out, err = capsys.readouterr()
        assert out.startswith("Right boundary filters for Daubechies 3 on [-5, 0]:\n")
        assert "k = 0 (scaling function supported on [-3, 0]):" in out

    @pytest.mark.parametrize(
        "arg_string,message",
        [
            ("interior 0", "No interior filter is available with 0 vanishing moments."),
            (
                "interior 50 --standard",
                "No standard Daubechies interior filter is available with 50",
            ),
            (
                "boundary 9",
                "No left boundary filter is available with 9 vanishing moments.",
            ),
            ("boundary 2 --member 2", "Boundary scaling function index 2 is out"),
        ],
    )
    def test_filter_errors(self, arg_string, message, capsys):
        assert main(split(arg_string)) == 1
        out, err = capsys.readouterr()
        assert out == ""
        assert err.startswith("error: ")
        assert message in err.replace("\n", " ")
