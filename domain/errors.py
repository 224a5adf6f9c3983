class CatalogError(Exception):
    """リクエスト単位で終端となるエラーの基底クラス"""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CatalogError):
    """不正な入力 (400)"""
    status_code = 400


class NotFoundError(CatalogError):
    status_code = 404


class UpstreamError(CatalogError):
    """外部メタデータAPIに到達できない、または非200を返した"""
    status_code = 500


class FormatError(CatalogError):
    """外部APIから返されたリリース日が解釈できない"""
    status_code = 500


class StorageError(CatalogError):
    status_code = 500
