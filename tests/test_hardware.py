import pytest

from simplemenu import hardware
from simplemenu.hardware import Backlight, CpuMode, SuspendController


def test_next_cpu_mode_cycles():
    assert hardware.next_cpu_mode(CpuMode.UNDERCLOCK) is CpuMode.NORMAL
    assert hardware.next_cpu_mode(CpuMode.NORMAL) is CpuMode.OVERCLOCK
    assert hardware.next_cpu_mode(CpuMode.OVERCLOCK) is CpuMode.UNDERCLOCK
    assert hardware.next_cpu_mode(CpuMode.SLEEP) is CpuMode.UNDERCLOCK


def test_bittboy_pll_lowest_and_highest():
    assert hardware.bittboy_pll_setting(0) == 0x00c81802 & 0xFFFF
    assert hardware.bittboy_pll_setting(0xc8) == 0x00c81802 & 0xFFFF
    assert hardware.bittboy_pll_setting(0xc9) == 0x00cc1013 & 0xFFFF
    assert hardware.bittboy_pll_setting(0x384) == 0x03841821 & 0xFFFF


def test_bittboy_pll_above_table_is_none():
    assert hardware.bittboy_pll_setting(0x385) is None


def test_bittboy_pll_fits_sixteen_bits():
    for mhz in range(0, 0x385, 37):
        assert 0 <= hardware.bittboy_pll_setting(mhz) <= 0xFFFF


@pytest.mark.parametrize("mhz", [60, 336, 600, 1080])
def test_jz_cpu_register_value_layout(mhz):
    value = hardware.jz_cpu_register_value(mhz)
    assert value & 0xFFFFFF == 0x090520
    assert value >> 24 == mhz // 6


def test_battery_percentage_bounds():
    assert hardware.battery_percentage(4200, 3400, 4200) == 100
    assert hardware.battery_percentage(3400, 3400, 4200) == 0
    assert hardware.battery_percentage(4500, 3400, 4200) == 100
    assert hardware.battery_percentage(3800, 3400, 4200) == 50


def test_battery_percentage_equal_voltages():
    with pytest.raises(ValueError):
        hardware.battery_percentage(1, 2, 2)


def test_read_battery_level(tmp_path):
    (tmp_path / "voltage_max_design").write_text("4200000\n")
    (tmp_path / "voltage_min_design").write_text("3400000\n")
    (tmp_path / "voltage_now").write_text("4200000\n")
    assert hardware.read_battery_level(tmp_path) == 100


def test_read_battery_level_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        hardware.read_battery_level(tmp_path)


def test_backlight_round_trip(tmp_path):
    light = Backlight(tmp_path / "brightness")
    light.write(7)
    assert light.read() == 7


def test_backlight_missing_file_reads_minus_one(tmp_path):
    assert Backlight(tmp_path / "absent").read() == -1


def test_suspend_and_resume_restore_state(tmp_path):
    light = Backlight(tmp_path / "brightness")
    light.write(5)
    controller = SuspendController(light, 30)
    controller.cpu = CpuMode.OVERCLOCK
    assert controller.suspend(False) is True
    assert controller.suspended is True
    assert light.read() == 0
    assert controller.cpu is CpuMode.SLEEP
    assert controller.resume() is True
    assert light.read() == 5
    assert controller.cpu is CpuMode.OVERCLOCK
    assert controller.suspended is False


def test_suspend_disabled_by_zero_timeout_or_usb(tmp_path):
    light = Backlight(tmp_path / "brightness")
    light.write(5)
    assert SuspendController(light, 0).suspend(False) is False
    assert SuspendController(light, 10).suspend(True) is False
    assert light.read() == 5


def test_resume_when_awake_does_nothing(tmp_path):
    light = Backlight(tmp_path / "brightness")
    light.write(3)
    controller = SuspendController(light, 10)
    assert controller.resume() is False
    assert light.read() == 3