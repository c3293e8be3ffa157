"""Tests for port interfaces."""

from collections.abc import Iterable

import pytest

from tsdbput.core.encoding.opentsdb import format_line
from tsdbput.core.models import EncoderConfig, Field, FieldValue, Record
from tsdbput.core.ports import HostnameResolverPort, InputRecordPort, OutputSinkPort


class TestInputRecordPort:
    """Tests for InputRecordPort protocol."""

    @pytest.mark.core
    def test_protocol_has_record_methods(self) -> None:
        for name in ("get_field", "get_fields", "get_timestamp"):
            assert hasattr(InputRecordPort, name)

    @pytest.mark.core
    def test_record_satisfies_protocol(self) -> None:
        assert isinstance(Record(timestamp=0), InputRecordPort)

    @pytest.mark.core
    def test_foreign_record_can_be_formatted(self) -> None:
        """Any object with the port's methods can be encoded."""

        class Message:
            def __init__(self) -> None:
                self._fields = {"Metric": "mem", "Value": 7, "tag_dc": "eu"}

            def get_field(self, name: str) -> tuple[bool, FieldValue | None]:
                if name in self._fields:
                    return True, self._fields[name]
                return False, None

            def get_fields(self) -> Iterable[Field]:
                return [Field(k, v) for k, v in self._fields.items()]

            def get_timestamp(self) -> int:
                return 9_000_000_000

        message = Message()
        assert isinstance(message, InputRecordPort)
        result = format_line(message, EncoderConfig(tag_name_prefix="tag_"))
        assert result.line == "put mem 9 7 dc=eu\n"


class TestCollaboratorPorts:
    """Tests for HostnameResolverPort and OutputSinkPort."""

    @pytest.mark.core
    def test_callable_satisfies_hostname_port(self) -> None:
        assert isinstance(lambda: "h1", HostnameResolverPort)

    @pytest.mark.core
    def test_class_with_write_satisfies_sink_port(self) -> None:
        class FakeSink:
            async def write(self, data: bytes) -> None:
                pass

        assert isinstance(FakeSink(), OutputSinkPort)
