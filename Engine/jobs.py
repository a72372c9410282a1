import psutil

# Background jobs: pid → command string
background_jobs = {}

FINISHED = ("terminated", psutil.STATUS_ZOMBIE)


def add_background_job(pid, argv):
    """Record a background job. The shell never waits on it."""
    prune_jobs()
    cmdline = " ".join(argv)
    background_jobs[pid] = cmdline
    print(f"[{pid}] started in background: {cmdline}")


def job_status(pid):
    """
    Current state of a recorded job as psutil sees it.
    Returns: psutil status string, or "terminated"
    """
    try:
        return psutil.Process(pid).status()
    except psutil.NoSuchProcess:
        return "terminated"


def prune_jobs():
    """Forget jobs that have finished so their pids can be reused safely"""
    for pid in list(background_jobs):
        try:
            status = job_status(pid)
        except psutil.AccessDenied:
            continue
        if status in FINISHED:
            background_jobs.pop(pid)


def show_jobs():
    """Print background jobs, dropping the ones that have gone away"""
    if not background_jobs:
        print("No background jobs.")
        return

    print(f"{'PID':<8} {'Command'}")
    print("-" * 40)
    for pid, cmd in list(background_jobs.items()):
        try:
            status = job_status(pid)
        except psutil.AccessDenied:
            status = "unknown"
        print(f"{pid:<8} {cmd}  [{status}]")
        if status in FINISHED:
            background_jobs.pop(pid)
