"""Plain-text job table loader.

Format: one job per line, four integers ``pj dj wj id``. Blank lines and lines
starting with ``#`` are ignored.
"""

from typing import List

from tardiness_tabu.models import Job


def parse_jobs(text: str) -> List[Job]:
    jobs: List[Job] = []
    seen: set[int] = set()
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        tokens = line.replace(",", " ").split()
        if len(tokens) != 4:
            raise ValueError(f"Line {line_no}: expected 4 integers (pj dj wj id), got {len(tokens)}")
        try:
            pj, dj, wj, job_id = map(int, tokens)
        except ValueError as e:
            raise ValueError(f"Line {line_no}: non-integer value in {line!r}") from e
        if job_id in seen:
            raise ValueError(f"Line {line_no}: duplicate job id {job_id}")
        seen.add(job_id)
        jobs.append(Job(pj, dj, wj, job_id))
    if not jobs:
        raise ValueError("No jobs found")
    return jobs


def load_jobs(file_path: str) -> List[Job]:
    with open(file_path, "r", encoding="utf-8") as f:
        return parse_jobs(f.read())
