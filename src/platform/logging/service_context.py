"""
Service identification for log lines.

Every log line is prefixed with `{service}@{env}:{instance}` so logs from
several replicas can be told apart once they are aggregated.
"""

from functools import lru_cache
import os


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'event-service')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Container hostname when running in k8s/ECS, PID for local development
    instance = os.getenv('HOSTNAME', '')[:12] or str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance}'
