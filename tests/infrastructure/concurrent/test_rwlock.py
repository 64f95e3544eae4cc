from unittest import TestCase
import threading
import time
import unittest

from src.keytensor.infrastructure.concurrent import ReadWriteLock


class TestReadWriteLock(TestCase):

    def test_readers_share(self):
        lock = ReadWriteLock()
        inside = threading.Barrier(3, timeout=5)

        def reader():
            with lock.read_lock():
                inside.wait()

        threads = [threading.Thread(target=reader) for _ in range(2)]
        for t in threads:
            t.start()
        # Both readers hold the lock at once, otherwise the barrier times out.
        inside.wait()
        for t in threads:
            t.join(5)
        self.assertFalse(any(t.is_alive() for t in threads))

    def test_writer_excludes_readers(self):
        lock = ReadWriteLock()
        events = []
        lock.acquire_write()

        def reader():
            with lock.read_lock():
                events.append("read")

        t = threading.Thread(target=reader)
        t.start()
        time.sleep(0.05)
        events.append("write-done")
        lock.release_write()
        t.join(5)
        self.assertEqual(events, ["write-done", "read"])

    def test_waiting_writer_blocks_new_readers(self):
        lock = ReadWriteLock()
        order = []
        lock.acquire_read()

        def writer():
            with lock.write_lock():
                order.append("write")

        def late_reader():
            with lock.read_lock():
                order.append("read")

        w = threading.Thread(target=writer)
        w.start()
        while lock._waiting_writers == 0:
            time.sleep(0.001)
        r = threading.Thread(target=late_reader)
        r.start()
        time.sleep(0.05)
        lock.release_read()
        w.join(5)
        r.join(5)
        self.assertEqual(order, ["write", "read"])

    def test_release_without_acquire(self):
        lock = ReadWriteLock()
        with self.assertRaises(RuntimeError):
            lock.release_read()
        with self.assertRaises(RuntimeError):
            lock.release_write()

    def test_released_on_exception(self):
        lock = ReadWriteLock()
        with self.assertRaises(ValueError):
            with lock.write_lock():
                raise ValueError("boom")
        with lock.write_lock():
            pass


if __name__ == "__main__":
    unittest.main()
