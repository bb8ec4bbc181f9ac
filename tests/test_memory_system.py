import io
import threading

from leakreport.memory_system import MemorySystem


def test_add_returns_zeroed_buffer_of_requested_size():
    system = MemorySystem()
    buffer = system.add_ptr_buffer(4, 32, "a.py", 1, "f")
    assert len(buffer) == 4 * 32
    assert not any(buffer)
    assert buffer in system
    assert len(system) == 1


def test_remove_untracks_buffer():
    system = MemorySystem()
    buffer = system.add_ptr_buffer(4, 8, "a.py", 1, "f")
    assert system.remove_ptr_buffer(buffer) is True
    assert buffer not in system
    assert len(system) == 0


def test_remove_unknown_buffer_is_ignored():
    system = MemorySystem()
    kept = system.add_ptr_buffer(1, 4, "a.py", 1, "f")
    assert system.remove_ptr_buffer(bytearray(4)) is False
    assert len(system) == 1
    assert kept in system


def test_remove_twice_second_is_ignored():
    system = MemorySystem()
    buffer = system.add_ptr_buffer(2, 2, "a.py", 1, "f")
    assert system.remove_ptr_buffer(buffer) is True
    assert system.remove_ptr_buffer(buffer) is False


def test_report_with_no_leaks_writes_nothing():
    system = MemorySystem()
    buffer = system.add_ptr_buffer(4, 1, "a.py", 1, "f")
    system.remove_ptr_buffer(buffer)
    out = io.StringIO()
    assert system.report_leaks(out) == []
    assert out.getvalue() == ""


def test_report_lists_leaks_with_origin():
    system = MemorySystem()
    system.add_ptr_buffer(4, 32, "demo.py", 17, "test_one", "floats")
    out = io.StringIO()
    leaks = system.report_leaks(out)
    assert len(leaks) == 1
    text = out.getvalue()
    assert text.startswith("Memory leaks detected in DLL:\n")
    assert (
        "Error: Ptr failed to delete at File: demo.py Line: 17 "
        "Function: test_one Notes: floats\n"
    ) in text


def test_report_default_streams(capsys):
    system = MemorySystem()
    system.add_ptr_buffer(1, 1, "x.py", 3, "g")
    system.report_leaks()
    captured = capsys.readouterr()
    assert "Memory leaks detected in DLL:" in captured.err
    assert "Function: g" in captured.out


def test_array_flag_follows_element_count():
    system = MemorySystem()
    system.add_ptr_buffer(4, 1, "x.py", 1, "single")
    system.add_ptr_buffer(4, 3, "x.py", 2, "many")
    leaks = {p.dangling_ptr_message.split("Function: ")[1].split(" ")[0]: p
             for p in system.report_leaks(io.StringIO())}
    assert leaks["single"].is_array is False
    assert leaks["many"].is_array is True


def test_concurrent_adds_are_all_tracked():
    system = MemorySystem()
    buffers = []
    guard = threading.Lock()

    def work():
        for _ in range(50):
            buf = system.add_ptr_buffer(1, 2, "t.py", 1, "work")
            with guard:
                buffers.append(buf)

    threads = [threading.Thread(target=work) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(buffers) == 200
    assert len(system) == 200
    removed = [system.remove_ptr_buffer(buf) for buf in buffers]
    assert removed == [True] * 200
    assert len(system) == 0