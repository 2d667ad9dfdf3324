import re
from collections import defaultdict

from .errors import DimensionError, FormatError


class SparseMatrix:
    """
    Implementación de Matriz Dispersa usando diccionarios para almacenar elementos no-cero.
    Las claves son tuplas (fila, col) y nunca se guarda un valor igual a cero.
    """

    def __init__(self, rows=0, cols=0):
        """
        Inicializa una matriz dispersa vacía con las dimensiones dadas.

        Args:
            rows (int): Número de filas
            cols (int): Número de columnas
        """
        self.rows = rows
        self.cols = cols
        self.data = {}  # (fila, col) -> valor entero distinto de cero

    @classmethod
    def from_text(cls, text):
        """
        Crea una matriz a partir del formato de texto:

            rows=<int>
            cols=<int>
            (<fila>, <col>, <valor>)
            ...

        Args:
            text (str): Contenido completo del archivo

        Returns:
            SparseMatrix: Matriz cargada

        Raises:
            FormatError: Si el encabezado o alguna entrada no tiene el formato esperado
        """
        lines = [line.strip() for line in text.split('\n')]
        if len(lines) < 2:
            raise FormatError('Invalid matrix dimensions format.')

        rows = _parse_dimension(lines[0])
        cols = _parse_dimension(lines[1])
        if rows is None or cols is None:
            raise FormatError('Invalid matrix dimensions format.')

        matrix = cls(rows, cols)
        for number, line in enumerate(lines[2:], start=3):
            if line == '':
                continue

            if not line.startswith('(') or not line.endswith(')'):
                raise FormatError('Input file has wrong format', line=number)

            values = [v.strip() for v in line[1:-1].split(',')]
            if len(values) != 3:
                raise FormatError(
                    f'Invalid number of values at line {number}. Expected 3 values: row,col,value',
                    line=number
                )

            row, col, value = (_parse_integer(v) for v in values)
            if row is None or col is None or value is None:
                raise FormatError('Input file has wrong format', line=number)

            matrix.set(row, col, value)

        return matrix

    @classmethod
    def from_file(cls, file_path):
        """Carga una matriz desde un archivo de texto"""
        with open(file_path, 'r', encoding='utf-8') as f:
            return cls.from_text(f.read())

    def set(self, row, col, value):
        """
        Establece un valor en la posición especificada.
        Un valor cero elimina la entrada en lugar de almacenarla.

        Args:
            row (int): Índice de fila
            col (int): Índice de columna
            value (int): Valor a establecer
        """
        if value != 0:
            self.data[(row, col)] = value
        else:
            self.data.pop((row, col), None)

    def get(self, row, col):
        """Obtiene el valor en (fila, col), 0 si no existe"""
        return self.data.get((row, col), 0)

    def non_zero_elements(self):
        """Copia del diccionario de elementos no-cero"""
        return self.data.copy()

    def add(self, other):
        """
        Suma otra matriz dispersa a esta.

        Args:
            other (SparseMatrix): Matriz a sumar

        Returns:
            SparseMatrix: Nueva matriz con el resultado
        """
        if self.rows != other.rows or self.cols != other.cols:
            raise DimensionError('Matrix dimensions must match for addition.', 'addition')

        result = SparseMatrix(self.rows, self.cols)
        for row, col in self.data.keys() | other.data.keys():
            result.set(row, col, self.get(row, col) + other.get(row, col))
        return result

    def subtract(self, other):
        """
        Resta otra matriz dispersa a esta.

        Args:
            other (SparseMatrix): Matriz a restar

        Returns:
            SparseMatrix: Nueva matriz con el resultado
        """
        if self.rows != other.rows or self.cols != other.cols:
            raise DimensionError('Matrix dimensions must match for subtraction.', 'subtraction')

        result = SparseMatrix(self.rows, self.cols)
        for row, col in self.data.keys() | other.data.keys():
            result.set(row, col, self.get(row, col) - other.get(row, col))
        return result

    def multiply(self, other):
        """
        Multiplica esta matriz por otra matriz dispersa recorriendo solo
        los elementos no-cero de ambas.

        Args:
            other (SparseMatrix): Matriz por la cual multiplicar

        Returns:
            SparseMatrix: Nueva matriz de dimensiones self.rows x other.cols
        """
        if self.cols != other.rows:
            raise DimensionError(
                'First matrix columns must match second matrix rows.', 'multiplication'
            )

        result = SparseMatrix(self.rows, other.cols)

        # Filas de la segunda matriz: fila -> [(col, valor), ...]
        other_rows = defaultdict(list)
        for (r, c), value in other.data.items():
            other_rows[r].append((c, value))

        for (row_a, col_a), value_a in self.data.items():
            for col_b, value_b in other_rows.get(col_a, ()):
                current_value = result.get(row_a, col_b)
                result.set(row_a, col_b, current_value + value_a * value_b)

        return result

    def serialize(self):
        """
        Convierte la matriz al mismo formato de texto que se usa para cargarla.

        Returns:
            str: Encabezado rows/cols seguido de una línea por elemento no-cero
        """
        lines = [f'rows={self.rows}', f'cols={self.cols}']
        for (row, col), value in self.data.items():
            lines.append(f'({row}, {col}, {value})')
        return '\n'.join(lines)

    def save_to_file(self, output_path):
        """Escribe la matriz serializada en un archivo"""
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(self.serialize())

    def __len__(self):
        return len(self.data)

    def __eq__(self, other):
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return (self.rows, self.cols, self.data) == (other.rows, other.cols, other.data)

    def __str__(self):
        return self.serialize()

    def __repr__(self):
        return f"SparseMatrix({self.rows}x{self.cols}, {len(self.data)} non-zero elements)"


# Solo dígitos ASCII: '1_0' o '١' no son enteros válidos
_INTEGER_RE = re.compile(r'[+-]?[0-9]+(?:\.[0-9]*)?')
_DIMENSION_RE = re.compile(r'\+?[0-9]+')


def _parse_dimension(line):
    if '=' not in line:
        return None
    token = line.split('=', 1)[1].strip()
    if not _DIMENSION_RE.fullmatch(token):
        return None
    return int(token)


def _parse_integer(token):
    """Convierte un campo numérico; None si no es un entero (p. ej. '2.5' o 'abc')"""
    if not _INTEGER_RE.fullmatch(token):
        return None
    whole, _, fraction = token.partition('.')
    if fraction.strip('0'):
        return None
    return int(whole)
