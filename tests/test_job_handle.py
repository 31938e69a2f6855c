import threading

import pytest

from core.job_handle import Failure, JobHandle, Success
from core.project_registry import ProjectDescriptor


def test_result_is_none_until_work_finishes():
    release = threading.Event()
    descriptor = ProjectDescriptor("p", "/tmp/p", "Blank")

    def work():
        release.wait(10)
        return descriptor

    handle = JobHandle(work)
    try:
        assert handle.try_take_result() is None
    finally:
        release.set()
        assert handle.wait(10000)

    assert handle.try_take_result() == Success(descriptor)
    assert handle.consumed


def test_exception_becomes_failure():
    def work():
        raise OSError("disk full")

    handle = JobHandle(work)
    assert handle.wait(10000)
    result = handle.try_take_result()

    assert isinstance(result, Failure)
    assert result.error.message == "disk full"
    assert result.error.error_type == "OSError"
    assert "OSError" in result.error.traceback


def test_result_cannot_be_taken_twice():
    handle = JobHandle(lambda: ProjectDescriptor("p", "/tmp/p", "Blank"))
    assert handle.wait(10000)
    handle.try_take_result()

    with pytest.raises(RuntimeError):
        handle.try_take_result()
