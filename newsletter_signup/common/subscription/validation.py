"""
구독 입력값 검증 규칙
"""

FORBIDDEN_CHARACTERS = frozenset('/()"<>\\{}')


def parse_valid_string(value: str, field_name: str = "값") -> str:
    """공백/금지문자 검사 후 입력값을 그대로 반환

    Raises:
        ValueError: 비어 있거나 금지문자(/ ( ) " < > \\ { })가 포함된 경우
    """
    if value is None or not value.strip():
        raise ValueError(f"{field_name}이(가) 비어 있습니다.")

    found = FORBIDDEN_CHARACTERS.intersection(value)
    if found:
        raise ValueError(
            f"{field_name}에 사용할 수 없는 문자가 포함되어 있습니다: {''.join(sorted(found))}"
        )
    return value


def parse_optional_string(value, field_name: str = "값"):
    """빈 값은 None, 그 외에는 parse_valid_string 규칙 적용"""
    if value is None or not str(value).strip():
        return None
    return parse_valid_string(str(value), field_name)


def standardize_email(email: str) -> str:
    """이메일 표준화 (공백 제거, 소문자)"""
    return email.strip().lower()
