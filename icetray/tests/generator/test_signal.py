"""Tests for signal types."""

import pytest

from icetray.generator import (
    DEFAULT_SCAN_RATE,
    Direction,
    IceCubeError,
    InvalidNameError,
    InvalidScanRateError,
    MissingFieldError,
    Signal,
    UnrecognizedDirectionError,
)


def describe_read_signal():
    def derives_record_and_pv_names(expect):
        sig = Signal.read("photoresistor1", "1 second")
        expect(sig.direction) == Direction.READ
        expect(sig.record_type) == "ai"
        expect(sig.pv_name) == "photoresistor1"
        expect(sig.pv_ext) == ":get"
        expect(sig.function_name) == "get_photoresistor1"
        expect(sig.scan_rate) == "1 second"

    def defaults_scan_rate(expect):
        expect(Signal.read("temp1").scan_rate) == DEFAULT_SCAN_RATE
        expect(DEFAULT_SCAN_RATE) == ".1 second"

    def requires_scan_rate(expect):
        with pytest.raises(MissingFieldError):
            Signal("temp1", Direction.READ)
        with pytest.raises(MissingFieldError):
            Signal("temp1", Direction.READ, "")

    @pytest.mark.parametrize("scan_rate", [1, 0.5, ["1 second"]])
    def rejects_non_string_scan_rate(expect, scan_rate):
        with pytest.raises(InvalidScanRateError):
            Signal.read("temp1", scan_rate)

    @pytest.mark.parametrize(
        "scan_rate", ['1 second")\n\tFLNK("other', "1 second\n", "1 second\r", '1 "second"']
    )
    def rejects_scan_rate_that_breaks_the_record(expect, scan_rate):
        with pytest.raises(InvalidScanRateError):
            Signal.read("temp1", scan_rate)

    def emits_record(expect):
        sig = Signal.read("photoresistor1", "1 second")
        expect(sig.emit_record("arduino.db")) == (
            "record(ai, photoresistor1) {\n"
            '\tDTYP("stream")\n'
            '\tINP("@arduino.db get_photoresistor1() $(PORT)")\n'
            '\tSCAN("1 second")\n'
            "}\n"
        )

    def emits_proto_function(expect):
        sig = Signal.read("photoresistor1", "1 second")
        expect(sig.emit_proto_function("A")) == (
            "get_photoresistor1 {\n"
            '\tout "A";\n'
            '\tin "A %f";\n'
            "\tExtraInput = Ignore;\n"
            "}\n"
        )


def describe_write_signal():
    def derives_record_and_pv_names(expect):
        sig = Signal.write("led1")
        expect(sig.direction) == Direction.WRITE
        expect(sig.record_type) == "ao"
        expect(sig.pv_name) == "led1:set"
        expect(sig.function_name) == "set_led1"
        expect(sig.scan_rate) == None

    def rejects_scan_rate(expect):
        with pytest.raises(IceCubeError):
            Signal("led1", Direction.WRITE, "1 second")

    def emits_record(expect):
        expect(Signal.write("led1").emit_record("arduino.db")) == (
            "record(ao, led1:set) {\n"
            '\tDTYP("stream")\n'
            '\tOUT("@arduino.db set_led1() $(PORT)")\n'
            "}\n"
        )

    def emits_proto_function(expect):
        expect(Signal.write("led1").emit_proto_function("B")) == (
            "set_led1 {\n" '\tout "B%d\\n";\n' "\tExtraInput = Ignore;\n" "}\n"
        )

    def uses_target_file_in_link(expect):
        record = Signal.write("led1").emit_record("cube.proto")
        expect('OUT("@cube.proto set_led1() $(PORT)")' in record) == True


def describe_signal_names():
    @pytest.mark.parametrize("name", ["", "led 1", "led:1", "led-1", "le$d", None, 5])
    def rejects_illegal_names(expect, name):
        with pytest.raises(InvalidNameError):
            Signal.write(name)

    def accepts_letters_digits_underscores(expect):
        expect(Signal.write("Led_1").name) == "Led_1"
        expect(Signal.write("1").name) == "1"


def describe_direction():
    def accepts_plain_strings(expect):
        sig = Signal("led1", "W")
        expect(sig.direction) == Direction.WRITE
        expect(sig.direction is Direction.WRITE) == True

    def rejects_unknown_direction(expect):
        with pytest.raises(UnrecognizedDirectionError):
            Signal("led1", "X")


def describe_equality():
    def equal_when_direction_name_and_scan_rate_match(expect):
        expect(Signal.read("a", "1 second")) == Signal.read("a", "1 second")
        expect(Signal.write("a")) == Signal.write("a")

    def differs_by_scan_rate(expect):
        expect(Signal.read("a", "1 second")) != Signal.read("a", "2 second")

    def differs_by_direction(expect):
        expect(Signal.read("a")) != Signal.write("a")

    def is_hashable(expect):
        expect(len({Signal.write("a"), Signal.write("a"), Signal.read("a")})) == 2


def describe_from_descriptor():
    def builds_read_signal(expect):
        sig = Signal.from_descriptor({"name": "temp1", "RW": "R", "scanRate": "5 second"})
        expect(sig) == Signal.read("temp1", "5 second")

    def builds_write_signal(expect):
        expect(Signal.from_descriptor({"name": "led1", "RW": "W"})) == Signal.write("led1")

    def ignores_scan_rate_on_write(expect):
        sig = Signal.from_descriptor({"name": "led1", "RW": "W", "scanRate": "1 second"})
        expect(sig.scan_rate) == None

    def requires_scan_rate_on_read(expect):
        with pytest.raises(MissingFieldError, match="scanRate"):
            Signal.from_descriptor({"name": "temp1", "RW": "R"})

    def requires_name(expect):
        with pytest.raises(MissingFieldError, match="name"):
            Signal.from_descriptor({"RW": "W"})

    def requires_direction(expect):
        with pytest.raises(MissingFieldError, match="RW"):
            Signal.from_descriptor({"name": "led1"})

    def rejects_unrecognized_direction(expect):
        with pytest.raises(UnrecognizedDirectionError, match="'X'"):
            Signal.from_descriptor({"name": "relay1", "RW": "X"})

    def rejects_numeric_scan_rate(expect):
        with pytest.raises(InvalidScanRateError):
            Signal.from_descriptor({"name": "temp1", "RW": "R", "scanRate": 1})

    def rejects_non_object(expect):
        with pytest.raises(MissingFieldError):
            Signal.from_descriptor(["led1", "W"])


def describe_descriptor():
    def read_includes_scan_rate(expect):
        doc = Signal.read("temp1", "5 second").descriptor()
        expect(doc.to_dict()) == {"name": "temp1", "RW": "R", "scanRate": "5 second"}

    def write_omits_scan_rate(expect):
        expect(Signal.write("led1").descriptor().to_dict()) == {"name": "led1", "RW": "W"}
