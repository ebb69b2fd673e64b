"""
Service context extraction for logging.

Identifies the running process in log lines so output from several
box-office workers can be told apart.
"""

import os
import socket
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'box-office')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')
    host = os.getenv('HOSTNAME') or socket.gethostname()
    return f'{service_name}@{deploy_env}:{host[:12]}:{os.getpid()}'
