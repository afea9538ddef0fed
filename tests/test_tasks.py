import threading

from xrtcsdk.tasks import TaskThread


def test_tasks_run_in_posting_order():
    results = []
    with TaskThread("order") as thread:
        for i in range(20):
            thread.post_task(lambda i=i: results.append(i))
    assert results == list(range(20))


def test_tasks_posted_before_start_run_after_start():
    results = []
    thread = TaskThread("late")
    thread.post_task(lambda: results.append("a"))
    assert results == []
    thread.start()
    thread.stop()
    assert results == ["a"]


def test_post_after_stop_is_dropped():
    results = []
    thread = TaskThread("stopped")
    thread.start()
    thread.stop()
    accepted = thread.post_task(lambda: results.append(1))
    assert accepted is False
    assert results == []
    assert thread.running is False


def test_task_runs_on_named_thread():
    seen = {}

    def task():
        seen["name"] = threading.current_thread().name

    with TaskThread("worker_x") as thread:
        thread.post_task(lambda: seen.setdefault("current", thread.is_current))
        thread.post_task(task)
    assert seen == {"name": "worker_x", "current": True}
    assert thread.is_current is False


def test_failing_task_does_not_stop_thread():
    results = []

    def boom():
        raise RuntimeError("boom")

    with TaskThread("robust") as thread:
        thread.post_task(boom)
        thread.post_task(lambda: results.append("after"))
    assert results == ["after"]


def test_stop_from_inside_task_does_not_deadlock():
    done = threading.Event()
    thread = TaskThread("self_stop")
    thread.start()
    thread.post_task(thread.stop)
    thread.post_task(done.set)
    assert done.wait(2)
    thread.stop()
    assert thread.post_task(lambda: None) is False