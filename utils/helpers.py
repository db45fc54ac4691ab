"""
Utility helper functions
"""
import secrets

# K8s generateName과 같은 문자 집합 (모음 제외)
_SUFFIX_ALPHABET = "bcdfghjklmnpqrstvwxz2456789"
SUFFIX_LENGTH = 5


def generate_suffix(length: int = SUFFIX_LENGTH) -> str:
    """오브젝트 이름용 랜덤 suffix 생성 (예: "x7k2q")"""
    return "".join(secrets.choice(_SUFFIX_ALPHABET) for _ in range(length))

