from fastapi import HTTPException, status

class BaseAppException(HTTPException):
    def __init__(self, status_code: int, detail: str):
        super().__init__(status_code=status_code, detail=detail)

    def __str__(self):
        return str(self.detail)

class ValidationError(BaseAppException):
    def __init__(self, detail: str = "Validation error"):
        super().__init__(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=detail)

class NotFoundError(BaseAppException):
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)

class PermissionDeniedError(BaseAppException):
    def __init__(self, detail: str = "Not enough permissions"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


# Domain errors raised by the category hierarchy rules. They carry no HTTP
# status; services translate them into ValidationError.

class CategoryHierarchyError(ValueError):
    """Base class for rejected category re-parenting"""

    def __init__(self, message: str, category_id=None, parent_id=None):
        super().__init__(message)
        self.category_id = category_id
        self.parent_id = parent_id

class CyclicHierarchyError(CategoryHierarchyError):
    """The new parent is the category itself or one of its descendants"""

class ParentNotFoundError(CategoryHierarchyError):
    """The referenced parent category does not exist"""
