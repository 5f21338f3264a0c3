# file: src/hamming_codec/messages.py

"""
Step log message templates.

Every line of a step log is rendered from one of these templates with
str.format(). 'es' reproduces the wording of the original web tool.
"""

from typing import Dict


MESSAGES: Dict[str, Dict[str, str]] = {
    'en': {
        'input_data': "Input data: {data}",
        'payload_length': "Payload length: {m} bits",
        'parity_bits_needed': "Parity bits required: {r}",
        'parity_placeholder': "Position {position} set as a parity bit",
        'parity_computed': "Parity at position {position}: {value}",
        'min_distance': "Minimum Hamming distance for this code: {distance}",
        'capability': "This code can detect {detectable} errors and correct {correctable} errors",
        'received_data': "Received data: {data}",
        'parity_checked': "Computed parity for position {position}: {value}",
        'out_of_bounds': "Error position {position} is out of bounds and cannot be corrected",
        'error_detected': "Error detected at position {position}",
        'original_data': "Original data: {data}",
        'corrected_data': "Corrected data: {data}",
        'no_error': "No error found in the data",
    },
    'es': {
        'input_data': "Datos de entrada: {data}",
        'payload_length': "Longitud de los datos: {m} bits",
        'parity_bits_needed': "Bits necesarios para la paridad: {r}",
        'parity_placeholder': "Posición {position} establecida como bit de paridad",
        'parity_computed': "Calcular la paridad en la posición {position}: {value}",
        'min_distance': "Distancia mínima de Hamming para este código: {distance}",
        'capability': "Este código puede detectar {detectable} errores y corregir {correctable} errores",
        'received_data': "Datos recibidos: {data}",
        'parity_checked': "Paridad calculada para la posición {position}: {value}",
        'out_of_bounds': "La posición de error {position} está fuera de límites y no se puede corregir",
        'error_detected': "Error detectado en la posición {position}",
        'original_data': "Dato original: {data}",
        'corrected_data': "Dato corregido: {data}",
        'no_error': "No se encontró ningún error en los datos",
    },
}

LANGUAGES = tuple(MESSAGES)


class StepLog:
    """
    Append-only step recorder for a single encode/decode call.

    The language must already be validated (see config.resolve_codec_options).

    freeze() hands out an immutable tuple for the result object.
    """

    def __init__(self, language: str = 'en'):
        self.language = language
        self._templates = MESSAGES[language]
        self._steps = []

    def add(self, key: str, **values):
        self._steps.append(self._templates[key].format(**values))

    def freeze(self) -> tuple:
        return tuple(self._steps)
