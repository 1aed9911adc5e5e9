# custom exception 정의 및 관리


class MetroException(Exception):  # 예외 구조 정의
    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


# ========== NotFound ==========


class LineNotFoundException(MetroException):
    def __init__(self, message: str = "노선을 찾을 수 없습니다"):
        super().__init__(message, code="LINE_NOT_FOUND")


class StationNotFoundException(MetroException):
    def __init__(self, message: str = "역을 찾을 수 없습니다"):
        super().__init__(message, code="STATION_NOT_FOUND")


class FarePairNotFoundException(MetroException):
    def __init__(self, message: str = "두 역이 함께 포함된 노선이 없습니다"):
        super().__init__(message, code="FARE_PAIR_NOT_FOUND")


# ========== InvalidArgument / Forbidden ==========


class InvalidArgumentException(MetroException):
    def __init__(self, message: str = "유효하지 않은 입력입니다"):
        super().__init__(message, code="INVALID_ARGUMENT")


class ForbiddenOperationException(MetroException):
    def __init__(self, message: str = "허용되지 않는 작업입니다"):
        super().__init__(message, code="FORBIDDEN")


# ========== 데이터 파일 ==========


class CatalogLoadException(MetroException):
    def __init__(self, message: str = "노선 데이터 파일을 읽을 수 없습니다"):
        super().__init__(message, code="CATALOG_LOAD_ERROR")


class PersistenceException(MetroException):
    def __init__(self, message: str = "노선 데이터 저장에 실패했습니다"):
        super().__init__(message, code="PERSISTENCE_ERROR")


NOT_FOUND_EXCEPTIONS = (
    LineNotFoundException,
    StationNotFoundException,
    FarePairNotFoundException,
)
