"""Tests for the reader/writer lock."""

import threading
import time

from volders.locks import ReadWriteLock


class TestReadWriteLock:
    """Test reader sharing and writer exclusion."""

    def test_readers_do_not_block_each_other(self):
        lock = ReadWriteLock()
        barrier = threading.Barrier(3, timeout=5)
        broken = []

        def reader():
            with lock.read_locked():
                try:
                    barrier.wait()
                except threading.BrokenBarrierError:
                    broken.append(True)

        threads = [threading.Thread(target=reader) for _ in range(3)]

        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert broken == []

    def test_writer_waits_for_reader(self):
        lock = ReadWriteLock()
        acquired = threading.Event()

        def writer():
            with lock.write_locked():
                acquired.set()

        lock.acquire_read()
        thread = threading.Thread(target=writer)
        thread.start()

        assert not acquired.wait(timeout=0.1)

        lock.release_read()
        thread.join(timeout=5)

        assert acquired.is_set()

    def test_reader_waits_for_writer(self):
        lock = ReadWriteLock()
        acquired = threading.Event()

        def reader():
            with lock.read_locked():
                acquired.set()

        lock.acquire_write()
        thread = threading.Thread(target=reader)
        thread.start()

        assert not acquired.wait(timeout=0.1)

        lock.release_write()
        thread.join(timeout=5)

        assert acquired.is_set()

    def test_waiting_writer_blocks_new_readers(self):
        lock = ReadWriteLock()
        order = []

        def writer():
            with lock.write_locked():
                order.append("writer")

        def late_reader():
            with lock.read_locked():
                order.append("reader")

        lock.acquire_read()
        writer_thread = threading.Thread(target=writer)
        writer_thread.start()
        time.sleep(0.05)

        reader_thread = threading.Thread(target=late_reader)
        reader_thread.start()
        time.sleep(0.05)

        assert order == []

        lock.release_read()
        writer_thread.join(timeout=5)
        reader_thread.join(timeout=5)

        assert order == ["writer", "reader"]

    def test_lock_released_on_exception(self):
        lock = ReadWriteLock()

        try:
            with lock.write_locked():
                raise RuntimeError("boom")
        except RuntimeError:
            pass

        with lock.read_locked():
            assert lock.active_readers == 1
        assert lock.active_readers == 0
