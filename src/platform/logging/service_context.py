"""
Service context extraction for log traceability.

Identifies which process produced a log line when several seating batches
run side by side (e.g. parallel pytest workers or shell pipelines).
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'seating')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # pytest-xdist worker id is more useful than the PID under test
    worker_id = os.getenv('PYTEST_XDIST_WORKER') or str(os.getpid())

    return f'{service_name}@{deploy_env}:{worker_id}'
