import pytest
from hypothesis import given
from hypothesis import strategies as st

from rtdconv.ads1243 import (
    CALIBRATE_DELAY,
    CONVERSION_DELAY,
    MUX_DEFAULT,
    RESET_DELAY,
    SETUP_DEFAULT,
    Ads1243,
    Command,
    Register,
    SpiBus,
    to_voltage,
)


class FakeDevice:
    def __init__(self, replies=()):
        self.replies = list(replies)
        self.sent = []
        self.events = []
        self.delays = []

    def exchange(self, byte):
        self.sent.append(byte)
        self.events.append(("byte", byte))
        return self.replies.pop(0) if self.replies else 0

    def select(self, level):
        self.events.append(("cs", level))

    def delay(self, seconds):
        self.delays.append(seconds)
        self.events.append(("delay", seconds))


def make_adc(replies=()):
    device = FakeDevice(replies)
    bus = SpiBus(device.exchange, device.select)
    return Ads1243(bus, delay=device.delay), device, bus


def test_reset_sends_reset_command_and_waits():
    adc, device, _ = make_adc()
    adc.reset()
    assert device.events == [
        ("cs", False),
        ("byte", Command.RESET),
        ("cs", True),
        ("delay", RESET_DELAY),
    ]


def test_init_resets_and_writes_defaults():
    adc, device, bus = make_adc()
    adc.init()
    assert device.sent == [
        0xFE,
        0x50, 0x00, SETUP_DEFAULT,
        0x51, 0x00, MUX_DEFAULT,
    ]
    assert device.delays == [RESET_DELAY]
    assert device.events[0] == ("cs", True)
    assert bus.selected is False


def test_write_reg_wire_bytes():
    adc, device, _ = make_adc()
    adc.write_reg(Register.FSR2, 0xAB)
    assert device.sent == [Command.WREG | 0x0C, 0x00, 0xAB]


def test_read_reg_returns_third_byte():
    adc, device, _ = make_adc(replies=[0x11, 0x22, 0x5A])
    assert adc.read_reg(Register.ACR) == 0x5A
    assert device.sent == [Command.RREG | 0x02, 0x00, 0x00]


def test_read_adc_assembles_big_endian_code():
    adc, device, _ = make_adc(replies=[0x00, 0x12, 0x34, 0x56])
    assert adc.read_adc() == 0x123456
    assert device.sent == [Command.RDATA, 0, 0, 0]
    assert device.delays == [CONVERSION_DELAY]
    assert device.events[0] == ("cs", False)
    assert device.events[-1] == ("cs", True)


def test_set_channel_writes_mux():
    adc, device, _ = make_adc()
    adc.set_channel(3)
    assert device.sent == [0x51, 0x00, 0x31]


@pytest.mark.parametrize("channel", [-1, 8, 200])
def test_set_channel_rejects_out_of_range(channel):
    adc, device, _ = make_adc()
    with pytest.raises(ValueError):
        adc.set_channel(channel)
    assert device.sent == []


def test_calibrate_sends_selfcal_and_waits():
    adc, device, _ = make_adc()
    adc.calibrate()
    assert device.sent == [0xF0]
    assert device.delays == [CALIBRATE_DELAY]


def test_write_reg_rejects_unknown_register():
    adc, device, _ = make_adc()
    with pytest.raises(ValueError):
        adc.write_reg(0x0D, 0)
    assert device.sent == []


def test_write_reg_rejects_non_byte_value():
    adc, _, _ = make_adc()
    with pytest.raises(ValueError):
        adc.write_reg(Register.SETUP, 256)


def test_chip_select_released_on_bus_error():
    def broken(byte):
        raise OSError("bus fault")

    bus = SpiBus(broken)
    adc = Ads1243(bus, delay=lambda s: None)
    with pytest.raises(OSError):
        adc.read_reg(Register.SETUP)
    assert bus.selected is False


def test_transfer_rejects_non_byte():
    bus = SpiBus(lambda b: b)
    with pytest.raises(ValueError):
        bus.transfer(256)


def test_transfer_masks_reply_to_byte():
    bus = SpiBus(lambda b: b + 0x100)
    assert bus.transfer(0x42) == 0x42


def test_to_voltage_zero():
    assert to_voltage(0, 2.5) == 0.0


def test_to_voltage_negative_full_scale():
    assert to_voltage(0x800000, 2.5) == -2.5


def test_to_voltage_minus_one_lsb():
    assert to_voltage(0xFFFFFF, 2.5) == pytest.approx(-2.5 / 8388608)


def test_to_voltage_positive_full_scale_below_vref():
    assert to_voltage(0x7FFFFF, 2.5) == pytest.approx(2.5 - 2.5 / 8388608)


@pytest.mark.parametrize("code", [-1, 0x1000000])
def test_to_voltage_rejects_out_of_range(code):
    with pytest.raises(ValueError):
        to_voltage(code, 2.5)


@given(st.integers(min_value=0, max_value=0xFFFFFF))
def test_to_voltage_within_reference(code):
    volts = to_voltage(code, 2.5)
    assert -2.5 <= volts < 2.5


@given(st.integers(min_value=1, max_value=0x7FFFFF))
def test_to_voltage_is_antisymmetric(code):
    negated = (-code) & 0xFFFFFF
    assert to_voltage(negated, 2.5) == pytest.approx(-to_voltage(code, 2.5))