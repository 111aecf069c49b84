# api/odontogram/constants.py

"""
Catálogo de notación dental del odontograma.

El código FDI (entero de dos dígitos) es la clave canónica de todo el motor.
Universal se obtiene por tabla fija y Palmer se calcula a partir del
cuadrante y la posición.
"""


class FDIConstants:
    """Gestión centralizada de códigos FDI"""

    CUADRANTES = {
        1: {'arcada': 'SUPERIOR', 'lado': 'DERECHO', 'denticion': 'permanente'},
        2: {'arcada': 'SUPERIOR', 'lado': 'IZQUIERDO', 'denticion': 'permanente'},
        3: {'arcada': 'INFERIOR', 'lado': 'IZQUIERDO', 'denticion': 'permanente'},
        4: {'arcada': 'INFERIOR', 'lado': 'DERECHO', 'denticion': 'permanente'},
        5: {'arcada': 'SUPERIOR', 'lado': 'DERECHO', 'denticion': 'temporal'},
        6: {'arcada': 'SUPERIOR', 'lado': 'IZQUIERDO', 'denticion': 'temporal'},
        7: {'arcada': 'INFERIOR', 'lado': 'IZQUIERDO', 'denticion': 'temporal'},
        8: {'arcada': 'INFERIOR', 'lado': 'DERECHO', 'denticion': 'temporal'},
    }

    POSICIONES_EN_CUADRANTE = {
        'permanente': {
            1: 'Incisivo central',
            2: 'Incisivo lateral',
            3: 'Canino',
            4: 'Primer premolar',
            5: 'Segundo premolar',
            6: 'Primer molar',
            7: 'Segundo molar',
            8: 'Tercer molar',
        },
        'temporal': {
            1: 'Incisivo central',
            2: 'Incisivo lateral',
            3: 'Canino',
            4: 'Primer molar',
            5: 'Segundo molar',
        }
    }

    # Orden clínico: de derecha a izquierda del paciente
    SUPERIOR_PERMANENTE = (18, 17, 16, 15, 14, 13, 12, 11, 21, 22, 23, 24, 25, 26, 27, 28)
    INFERIOR_PERMANENTE = (48, 47, 46, 45, 44, 43, 42, 41, 31, 32, 33, 34, 35, 36, 37, 38)
    SUPERIOR_TEMPORAL = (55, 54, 53, 52, 51, 61, 62, 63, 64, 65)
    INFERIOR_TEMPORAL = (85, 84, 83, 82, 81, 71, 72, 73, 74, 75)

    FDI_A_UNIVERSAL = {
        18: '1', 17: '2', 16: '3', 15: '4', 14: '5', 13: '6', 12: '7', 11: '8',
        21: '9', 22: '10', 23: '11', 24: '12', 25: '13', 26: '14', 27: '15', 28: '16',
        38: '17', 37: '18', 36: '19', 35: '20', 34: '21', 33: '22', 32: '23', 31: '24',
        41: '25', 42: '26', 43: '27', 44: '28', 45: '29', 46: '30', 47: '31', 48: '32',
        # Temporales
        55: 'A', 54: 'B', 53: 'C', 52: 'D', 51: 'E',
        61: 'F', 62: 'G', 63: 'H', 64: 'I', 65: 'J',
        75: 'K', 74: 'L', 73: 'M', 72: 'N', 71: 'O',
        81: 'P', 82: 'Q', 83: 'R', 84: 'S', 85: 'T',
    }

    # Símbolo de cuadrante Palmer (vista del clínico frente al paciente)
    SIMBOLOS_PALMER = {
        ('SUPERIOR', 'DERECHO'): '┘',
        ('SUPERIOR', 'IZQUIERDO'): '└',
        ('INFERIOR', 'DERECHO'): '┐',
        ('INFERIOR', 'IZQUIERDO'): '┌',
    }

    LETRAS_PALMER_TEMPORAL = {1: 'A', 2: 'B', 3: 'C', 4: 'D', 5: 'E'}

    NOTACIONES = ('fdi', 'universal', 'palmer')

    @classmethod
    def arcadas(cls, uses_primary_dentition=False):
        """
        Retorna (superior, inferior) como listas de códigos FDI
        en el orden en que se dibujan.
        """
        if uses_primary_dentition:
            return list(cls.SUPERIOR_TEMPORAL), list(cls.INFERIOR_TEMPORAL)
        return list(cls.SUPERIOR_PERMANENTE), list(cls.INFERIOR_PERMANENTE)

    @classmethod
    def dientes_activos(cls, uses_primary_dentition=False):
        superior, inferior = cls.arcadas(uses_primary_dentition)
        return superior + inferior

    @classmethod
    def obtener_info_fdi(cls, codigo_fdi):
        """
        Extrae información del código FDI
        Retorna: {cuadrante, posicion, arcada, lado, denticion, nombre, tipo}
        o None si el código no pertenece a ninguna dentición conocida.
        """
        try:
            codigo = int(codigo_fdi)
        except (TypeError, ValueError):
            return None

        if codigo < 11 or codigo > 88:
            return None

        cuadrante, posicion = divmod(codigo, 10)
        if cuadrante not in cls.CUADRANTES:
            return None

        info_cuad = cls.CUADRANTES[cuadrante]
        denticion = info_cuad['denticion']

        if posicion not in cls.POSICIONES_EN_CUADRANTE[denticion]:
            return None

        return {
            'codigo_fdi': codigo,
            'cuadrante': cuadrante,
            'posicion': posicion,
            'arcada': info_cuad['arcada'],
            'lado': info_cuad['lado'],
            'denticion': denticion,
            'nombre': cls.POSICIONES_EN_CUADRANTE[denticion][posicion],
            'tipo': cls.tipo_diente(codigo),
        }

    @classmethod
    def denticion_de(cls, codigo_fdi):
        """'permanente', 'temporal' o None si el código es desconocido"""
        info = cls.obtener_info_fdi(codigo_fdi)
        return info['denticion'] if info else None

    @staticmethod
    def tipo_diente(codigo_fdi):
        """Forma del diente, usada por la capa de dibujo"""
        cuadrante, posicion = divmod(int(codigo_fdi), 10)
        if cuadrante >= 5:
            if posicion >= 4:
                return 'molar'
            return 'canine' if posicion == 3 else 'incisor'
        if posicion >= 6:
            return 'molar'
        if posicion >= 4:
            return 'premolar'
        return 'canine' if posicion == 3 else 'incisor'

    @classmethod
    def universal_label(cls, codigo_fdi):
        """Etiqueta Universal; los códigos desconocidos devuelven el propio FDI"""
        try:
            return cls.FDI_A_UNIVERSAL.get(int(codigo_fdi), str(codigo_fdi))
        except (TypeError, ValueError):
            return str(codigo_fdi)

    @classmethod
    def palmer_label(cls, codigo_fdi):
        """
        Etiqueta Palmer calculada: símbolo de cuadrante + posición.
        Permanentes usan dígitos 1-8, temporales letras A-E.
        """
        info = cls.obtener_info_fdi(codigo_fdi)
        if not info:
            return str(codigo_fdi)

        simbolo = cls.SIMBOLOS_PALMER[(info['arcada'], info['lado'])]
        if info['denticion'] == 'temporal':
            return f"{cls.LETRAS_PALMER_TEMPORAL[info['posicion']]}{simbolo}"
        return f"{info['posicion']}{simbolo}"

    @classmethod
    def etiqueta(cls, codigo_fdi, notacion='fdi'):
        if notacion == 'universal':
            return cls.universal_label(codigo_fdi)
        if notacion == 'palmer':
            return cls.palmer_label(codigo_fdi)
        return str(codigo_fdi)
