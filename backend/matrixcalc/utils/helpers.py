from datetime import datetime, timezone


def file_stem(filename):
    """Strip a trailing .txt from a matrix file name"""
    name = filename.replace('\\', '/').rsplit('/', 1)[-1]
    if name.endswith('.txt'):
        return name[:-4]
    return name


def matrix_to_dict(matrix):
    """Serialize a SparseMatrix for JSON responses"""
    return {
        'rows': matrix.rows,
        'cols': matrix.cols,
        'entries': [[row, col, value] for (row, col), value in matrix.data.items()],
        'text': matrix.serialize()
    }


def generate_response(success=True, data=None, message=None, error=None):
    """Generate standardized API response"""
    response = {
        'success': success,
        'timestamp': datetime.now(timezone.utc).isoformat()
    }

    if data is not None:
        response['data'] = data

    if message:
        response['message'] = message

    if error:
        response['error'] = error

    return response
