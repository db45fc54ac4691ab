"""
Kubernetes client initialization and utilities
"""
import logging
from typing import Tuple

from kubernetes import client, config
from kubernetes.client.rest import ApiException

from .exceptions import ClientAcquisitionError

logger = logging.getLogger(__name__)


def get_k8s_clients(config_file: str) -> Tuple[client.CoreV1Api, client.AppsV1Api]:
    """Kubernetes API 클라이언트 초기화 및 반환

    전역 설정을 바꾸지 않도록 kubeconfig 파일마다 별도 ApiClient를 만든다.

    Returns:
        tuple: (CoreV1Api, AppsV1Api)
        - CoreV1Api: Service 생성
        - AppsV1Api: Deployment 생성

    Raises:
        ClientAcquisitionError: kubeconfig를 읽을 수 없거나 클라이언트 생성 실패 시
    """
    try:
        api_client = config.new_client_from_config(config_file=config_file)
    except Exception as e:
        logger.error(f"Failed to load kubeconfig {config_file}: {e}")
        raise ClientAcquisitionError(
            f"could not create a Kubernetes client from {config_file}: {e}"
        ) from e

    logger.debug(f"K8s client created from {config_file}")
    return client.CoreV1Api(api_client), client.AppsV1Api(api_client)


__all__ = ['get_k8s_clients', 'ApiException']
