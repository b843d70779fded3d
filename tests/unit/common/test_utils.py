"""Tests for common.utils module."""

from dataclasses import dataclass

from common.utils import get_hostname, get_value


class TestGetValue:
    def test_dict(self) -> None:
        assert get_value({"a": 1}, "a") == 1
        assert get_value({}, "a") is None

    def test_object(self) -> None:
        @dataclass
        class Item:
            a: int

        assert get_value(Item(a=2), "a") == 2
        assert get_value(Item(a=2), "b") is None


class TestGetHostname:
    def test_lowercases_host(self) -> None:
        assert get_hostname("https://WWW.Emol.CL/noticias") == "www.emol.cl"

    def test_strips_port_and_credentials(self) -> None:
        assert get_hostname("http://user:pw@example.cl:8080/x") == "example.cl"

    def test_missing_or_relative(self) -> None:
        assert get_hostname(None) == ""
        assert get_hostname("") == ""
        assert get_hostname("/relative/path") == ""
