from collections import namedtuple
import pytest
from termistat.collectors import system_collector
from termistat.collectors.system_collector import SystemCollector, decode_mount_path
from .conftest import MEMINFO, write


DiskStat = namedtuple("DiskStat", "total used free percent")


def test_memory(config, fake_root):
    proc, _ = fake_root
    write(proc / "meminfo", MEMINFO)
    memory = SystemCollector(config).collect_memory()
    assert memory.total_kb == 8000000
    assert memory.available_kb == 2000000
    assert memory.used_kb == 6000000
    assert memory.percent == pytest.approx(75.0)


def test_memory_missing_source_is_zero(config):
    memory = SystemCollector(config).collect_memory()
    assert memory.total_kb == 0
    assert memory.percent == 0.0


def test_cpu_usage_delta(config):
    collector = SystemCollector(config)
    collector.prev_idle, collector.prev_total = 100, 200
    assert collector.cpu_usage(150, 400) == pytest.approx(75.0)
    assert (collector.prev_idle, collector.prev_total) == (150, 400)


def test_cpu_usage_zero_delta(config):
    collector = SystemCollector(config)
    collector.cpu_usage(100, 200)
    assert collector.cpu_usage(100, 200) == 0.0


def test_cpu_from_stat(config, fake_root):
    proc, _ = fake_root
    write(proc / "stat", "cpu  10 0 10 70 10 0 0 0 0 0\ncpu0 10 0 10 70 10 0 0 0 0 0\n")
    collector = SystemCollector(config)
    assert collector.read_cpu_times() == (80, 100)

    # First sample compares against zeroed counters
    assert collector.collect_cpu().usage_percent == pytest.approx(20.0)

    write(proc / "stat", "cpu  60 0 10 110 10 0 0 0 0 0\n")
    cpu = collector.collect_cpu()
    assert cpu.usage_percent == pytest.approx(100.0 * (90 - 40) / 90)


def test_cpu_missing_stat(config):
    assert SystemCollector(config).collect_cpu().usage_percent == 0.0


def test_temperature(config, fake_root):
    _, sys_ = fake_root
    write(sys_ / "class/thermal/thermal_zone0/temp", "45500\n")
    assert SystemCollector(config).read_temperature() == pytest.approx(45.5)


def test_temperature_unavailable(config):
    assert SystemCollector(config).read_temperature() is None


def test_fan_first_positive_reading(config, fake_root):
    _, sys_ = fake_root
    hwmon = sys_ / "class/hwmon"
    write(hwmon / "hwmon0/name", "acpitz\n")
    write(hwmon / "hwmon1/name", "nct6775\n")
    write(hwmon / "hwmon1/fan1_input", "0\n")
    write(hwmon / "hwmon1/fan2_input", "1450\n")
    write(hwmon / "hwmon1/fan3_input", "900\n")
    assert SystemCollector(config).read_fan_rpm() == 1450


def test_fan_skips_devices_without_name(config, fake_root):
    _, sys_ = fake_root
    write(sys_ / "class/hwmon/hwmon0/fan1_input", "1200\n")
    assert SystemCollector(config).read_fan_rpm() is None


def test_fan_beyond_limit_is_ignored(config, fake_root):
    _, sys_ = fake_root
    write(sys_ / "class/hwmon/hwmon0/name", "it87\n")
    write(sys_ / "class/hwmon/hwmon0/fan6_input", "1200\n")
    assert SystemCollector(config).read_fan_rpm() is None


def test_battery(config, fake_root):
    _, sys_ = fake_root
    write(sys_ / "class/power_supply/BAT0/capacity", "87\n")
    write(sys_ / "class/power_supply/BAT0/status", "Charging\n")
    battery = SystemCollector(config).collect_battery()
    assert battery.available
    assert battery.capacity == 87
    assert battery.status == "Charging"


def test_battery_absent(config, fake_root):
    _, sys_ = fake_root
    # Only BAT0 is looked at
    write(sys_ / "class/power_supply/BAT1/capacity", "87\n")
    write(sys_ / "class/power_supply/BAT1/status", "Full\n")
    battery = SystemCollector(config).collect_battery()
    assert not battery.available
    assert battery.capacity == -1
    assert battery.status == "Unknown"


def test_battery_needs_both_files(config, fake_root):
    _, sys_ = fake_root
    write(sys_ / "class/power_supply/BAT0/capacity", "50\n")
    assert not SystemCollector(config).collect_battery().available


def test_disks_exclude_by_substring(config, fake_root, monkeypatch):
    proc, _ = fake_root
    write(proc / "mounts", "\n".join([
        "/dev/sda1 / ext4 rw 0 0",
        "udev /dev devtmpfs rw 0 0",
        "sysfs /sys sysfs rw 0 0",
        "/dev/sda2 /home/dev-user ext4 rw 0 0",
        "/dev/sda3 /data/sysroot ext4 rw 0 0",
        "/dev/sdb1 /mnt/my\\040disk vfat rw 0 0",
        "proc /proc proc rw 0 0",
    ]) + "\n")

    queried = []

    def fake_disk_usage(path):
        queried.append(path)
        if path == "/proc":
            return DiskStat(0, 0, 0, 0.0)
        return DiskStat(1000, 400, 600, 40.0)

    monkeypatch.setattr(system_collector.psutil, "disk_usage", fake_disk_usage)
    disks = SystemCollector(config).collect_disks()

    assert queried == ["/", "/mnt/my disk", "/proc"]
    assert [d.mountpoint for d in disks] == ["/", "/mnt/my disk"]
    assert disks[0].percent == pytest.approx(40.0)


def test_disks_skip_unreadable_mounts(config, fake_root, monkeypatch):
    proc, _ = fake_root
    write(proc / "mounts", "/dev/sda1 / ext4 rw 0 0\nserver:/x /mnt/nfs nfs rw 0 0\n")

    def fake_disk_usage(path):
        if path == "/mnt/nfs":
            raise PermissionError(path)
        return DiskStat(1000, 100, 900, 10.0)

    monkeypatch.setattr(system_collector.psutil, "disk_usage", fake_disk_usage)
    assert [d.mountpoint for d in SystemCollector(config).collect_disks()] == ["/"]


def test_decode_mount_path():
    assert decode_mount_path("/mnt/a\\040b\\011c") == "/mnt/a b\tc"
    assert decode_mount_path("/plain") == "/plain"
