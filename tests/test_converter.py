"""Tests for the convert() library entry point.

WHY: convert() is the public contract: document text in, SRT text out.
These tests pin the end-to-end behaviour library callers rely on.

HOW: Calls convert() on the shared fixture documents and compares the
complete output string.
"""

import os

import pytest

from ttml2srt import ConversionError, InvalidTimecodeError, MalformedInputError, convert


class TestConvert:
    """End-to-end conversion."""

    def test_two_paragraph_document(self, two_paragraph_ttml, two_paragraph_srt):
        assert convert(two_paragraph_ttml, newline="\n") == two_paragraph_srt

    def test_styled_document(self, ebu_tt_styled, ebu_tt_styled_srt):
        assert convert(ebu_tt_styled, newline="\n") == ebu_tt_styled_srt

    def test_styles_disabled(self, ebu_tt_styled):
        srt = convert(ebu_tt_styled, styles_enabled=False, newline="\n")
        assert "<font" not in srt
        assert srt.startswith("1\n00:00:01.000 --> 00:00:03.500\nGuten Abend.\n\n2\n")

    def test_hour_offset_correction_disabled(self, ebu_tt_styled):
        srt = convert(ebu_tt_styled, hour_offset_correction=False, newline="\n")
        assert "10:00:01.000 --> 10:00:03.500" in srt
        assert "20:00:07.000 --> 20:00:08.000" in srt

    def test_default_newline_is_platform(self, two_paragraph_ttml, two_paragraph_srt):
        assert convert(two_paragraph_ttml) == two_paragraph_srt.replace("\n", os.linesep)

    def test_crlf_newline(self, two_paragraph_ttml, two_paragraph_srt):
        assert convert(two_paragraph_ttml, newline="\r\n") == two_paragraph_srt.replace("\n", "\r\n")

    def test_empty_div_gives_empty_output(self):
        xml = '<tt xmlns="http://www.w3.org/ns/ttml"><body><div/></body></tt>'
        assert convert(xml) == ""


class TestConvertErrors:
    """Failures propagate as ConversionError subclasses."""

    def test_malformed_input(self, malformed_ttml):
        with pytest.raises(MalformedInputError):
            convert(malformed_ttml)

    def test_invalid_timecode(self):
        xml = (
            '<tt xmlns="http://www.w3.org/ns/ttml"><body><div>'
            '<p begin="1s" end="2s">ok</p>'
            '<p begin="00:00:03:10" end="4s">frames</p>'
            "</div></body></tt>"
        )
        with pytest.raises(InvalidTimecodeError) as exc_info:
            convert(xml)
        assert exc_info.value.token == "00:00:03:10"

    @pytest.mark.parametrize("xml", ["", "<tt/>", "plain text"])
    def test_errors_share_a_base_class(self, xml):
        with pytest.raises(ConversionError):
            convert(xml)
