import os
import sys
from unittest import mock

import pytest

from robotkit.process import Process, current_process, is_sys_64bit, list_processes

MISSING_PID = 0x7FFFFFFE


@pytest.fixture
def invalid_processes():
    p1 = Process()
    p2 = Process()
    opened_zero = p2.open(0)
    p3 = Process()
    opened_negative = p3.open(-1)
    p4 = Process(MISSING_PID)
    return p1, p2, p3, p4, opened_zero, opened_negative


def test_open_rejects_non_positive_pids(invalid_processes):
    *_, opened_zero, opened_negative = invalid_processes
    assert opened_zero is False
    assert opened_negative is False


def test_invalid_processes_state(invalid_processes):
    for process in invalid_processes[:4]:
        assert not process.is_valid()
        assert not process.is_64bit()
        assert process.has_exited()
        assert process.pid == 0
        assert process.handle == 0
        assert process.name == ""
        assert process.path == ""


def test_invalid_processes_compare_equal(invalid_processes):
    p1, p2, p3, p4 = invalid_processes[:4]
    assert p1 == p2 and p2 == p1
    assert not (p1 != p2) and not (p2 != p1)
    assert p3 == p4 and p4 == p3
    assert not (p3 != p4) and not (p4 != p3)
    for process in (p1, p2, p3, p4):
        assert process == 0
        assert process != 8888


def test_invalid_process_has_no_modules_and_no_tracer():
    process = Process(MISSING_PID)
    assert process.modules() == []
    assert process.is_debugged() is False


def test_signals_on_invalid_process_do_nothing():
    process = Process()
    process.exit()
    process.kill()
    assert process.pid == 0
    assert process.has_exited()


def test_current_process():
    pid = os.getpid()
    p1 = Process(pid)
    p2 = current_process()

    assert p1.is_valid() and not p1.has_exited()
    assert p2.is_valid() and not p2.has_exited()
    assert p1.pid == pid
    assert p2.pid == pid
    assert p1.is_64bit() == (sys.maxsize > 2**32)
    assert p2.is_64bit() == (sys.maxsize > 2**32)
    assert p1.handle == 0 and p2.handle == 0

    assert p1 == p2 and p2 == p1
    assert not (p1 != p2) and not (p2 != p1)
    assert p1 == pid and p1 != 8888
    assert p2 == pid and p2 != 8888
    assert hash(p1) == hash(p2)

    p1.close()
    assert not p1.is_valid()
    p2.close()
    assert not p2.is_valid()
    assert p2.name == "" and p2.path == ""


def test_current_process_path():
    process = current_process()
    expected = os.readlink("/proc/self/exe")
    assert process.path == expected
    assert process.name == os.path.basename(expected)


def test_reopen_replaces_previous_process():
    process = current_process()
    assert process.open(MISSING_PID) is False
    assert process.pid == 0


def test_compare_with_other_type():
    assert (current_process() == "text") is False


def test_list_rejects_bad_patterns():
    assert list_processes("*") == []
    assert list_processes(")") == []


def test_list_contains_current_process():
    me = current_process()
    everything = list_processes()
    all_pattern = list_processes(".*")
    assert me in everything
    assert me in all_pattern
    for process in everything:
        assert process.pid > 0


def test_list_filter_is_case_insensitive():
    lower = list_processes(".*a.*")
    for process in lower:
        assert "a" in process.name or "A" in process.name
    upper = list_processes(".*A.*")
    for process in upper:
        assert "a" in process.name or "A" in process.name


def test_list_by_exact_name_finds_current():
    me = current_process()
    found = list_processes(me.name.replace(".", r"\.").upper())
    assert me in found
    for process in found:
        assert process.name.lower() == me.name.lower()


def test_modules_of_current_process():
    me = current_process()
    modules = me.modules()
    assert modules
    bases = [module.base for module in modules]
    assert bases == sorted(bases)
    assert any(module.path == me.path for module in modules)
    for module in modules:
        assert module.is_valid()
        assert module.process == me
        assert module.size > 0


def test_modules_filtered_by_name():
    me = current_process()
    pattern = me.name.replace(".", r"\.")
    modules = me.modules(pattern)
    assert modules
    for module in modules:
        assert module.name.lower() == me.name.lower()


def test_modules_bad_pattern():
    assert current_process().modules("*") == []


def test_is_sys_64bit_x86_64():
    is_sys_64bit.cache_clear()
    try:
        with mock.patch("platform.machine", return_value="x86_64"):
            assert is_sys_64bit() is True
    finally:
        is_sys_64bit.cache_clear()


def test_is_sys_64bit_other_machine():
    is_sys_64bit.cache_clear()
    try:
        with mock.patch("platform.machine", return_value="i686"):
            assert is_sys_64bit() is False
    finally:
        is_sys_64bit.cache_clear()