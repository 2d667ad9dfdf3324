class MatrixError(Exception):
    """Base error for sparse matrix loading and arithmetic"""

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'error': self.message}


class FormatError(MatrixError):
    """Raised when a matrix text does not follow the rows/cols/(r, c, v) format"""

    def __init__(self, message, line=None):
        super().__init__(message)
        self.line = line

    def to_dict(self):
        data = super().to_dict()
        if self.line is not None:
            data['line'] = self.line
        return data


class DimensionError(MatrixError):
    """Raised when operand shapes do not fit the requested operation"""

    def __init__(self, message, operation):
        super().__init__(message)
        self.operation = operation

    def to_dict(self):
        data = super().to_dict()
        data['operation'] = self.operation
        return data
