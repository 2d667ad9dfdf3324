import os

from marshmallow import ValidationError

from ..utils.helpers import file_stem
from ..utils.sparse_matrix import SparseMatrix

# operación -> (método de SparseMatrix, palabra usada en el nombre del resultado)
OPERATIONS = {
    'add': ('add', 'plus'),
    'subtract': ('subtract', 'minus'),
    'multiply': ('multiply', 'times'),
}

# Opciones numéricas del menú interactivo
MENU_CHOICES = {
    '1': 'add',
    '2': 'subtract',
    '3': 'multiply',
}


class MatrixService:
    """Servicio que carga dos matrices dispersas, las opera y guarda el resultado"""

    def __init__(self, results_dir='resultsOutputs'):
        self.results_dir = results_dir

    def resolve_operation(self, operation):
        """
        Normaliza el selector de operación.

        Args:
            operation (str): 'add', 'subtract', 'multiply' o la opción '1'-'3' del menú

        Returns:
            str: Nombre canónico de la operación
        """
        key = str(operation).strip().lower() if operation is not None else ''
        key = MENU_CHOICES.get(key, key)
        if key not in OPERATIONS:
            raise ValidationError(f'Invalid operation: {operation}', field_name='operation')
        return key

    def compute(self, operation, first_text, second_text):
        """Parsea ambos textos y devuelve la matriz resultante"""
        name = self.resolve_operation(operation)
        first = SparseMatrix.from_text(first_text)
        second = SparseMatrix.from_text(second_text)
        method, _ = OPERATIONS[name]
        return getattr(first, method)(second)

    def result_filename(self, operation, first_name, second_name):
        """Nombre del archivo de resultado, p. ej. a_plus_b.txt"""
        _, word = OPERATIONS[self.resolve_operation(operation)]
        return f'{file_stem(first_name)}_{word}_{file_stem(second_name)}.txt'

    def compute_and_save(self, operation, first_name, first_text, second_name, second_text):
        """
        Opera dos matrices y escribe el resultado en el directorio de resultados.
        Si la carga o la operación fallan no se escribe ningún archivo.

        Returns:
            tuple: (SparseMatrix resultado, ruta del archivo escrito)
        """
        result = self.compute(operation, first_text, second_text)
        filename = self.result_filename(operation, first_name, second_name)

        os.makedirs(self.results_dir, exist_ok=True)
        output_path = os.path.join(self.results_dir, filename)
        result.save_to_file(output_path)
        return result, output_path

    def compute_files(self, operation, first_path, second_path):
        """Igual que compute_and_save pero leyendo las matrices desde disco"""
        self.resolve_operation(operation)
        with open(first_path, 'r', encoding='utf-8') as f:
            first_text = f.read()
        with open(second_path, 'r', encoding='utf-8') as f:
            second_text = f.read()
        return self.compute_and_save(operation, first_path, first_text, second_path, second_text)

    def get_result_path(self, filename):
        """Ruta de un resultado guardado, None si no existe"""
        path = os.path.join(self.results_dir, filename)
        if os.path.isfile(path):
            return path
        return None

    def list_results(self):
        """Lista los archivos de resultado guardados"""
        if not os.path.isdir(self.results_dir):
            return []
        return sorted(name for name in os.listdir(self.results_dir) if name.endswith('.txt'))
