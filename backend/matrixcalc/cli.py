"""
Menú interactivo para sumar, restar o multiplicar dos matrices dispersas.
El resultado se guarda en el directorio configurado en RESULTS_DIR.
"""

from flask import current_app
from marshmallow import ValidationError

from matrixcalc import create_app
from matrixcalc.services.matrix_service import MENU_CHOICES, MatrixService
from matrixcalc.utils.errors import MatrixError

def run_calculator(input_func=input):
    """Pide la operación y los dos archivos, y guarda el resultado"""
    print("\nOperations:\n1. Add\n2. Subtract\n3. Multiply")

    choice = input_func("Select operation (1-3): ").strip()
    if choice not in MENU_CHOICES:
        print("Invalid option.")
        return None

    first_path = input_func("Enter first matrix file: ").strip()
    second_path = input_func("Enter second matrix file: ").strip()

    service = MatrixService(current_app.config['RESULTS_DIR'])
    try:
        _, output_path = service.compute_files(choice, first_path, second_path)
    except (MatrixError, ValidationError, UnicodeDecodeError, OSError) as e:
        print(f"Error: {getattr(e, 'message', None) or e}")
        return None

    print(f"Result saved to {output_path}")
    return output_path

def main():
    """Entry point for the matrixcalc command"""
    app = create_app()
    with app.app_context():
        run_calculator()

if __name__ == '__main__':
    main()
