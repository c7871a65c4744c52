"""
Custom exceptions
"""


class InvalidAmountError(Exception):
    """Erro ao converter valor numérico informado pelo usuário"""
    pass


class StoreError(Exception):
    """Erro nas operações do Firestore"""
    pass


class UserResolutionError(Exception):
    """Não foi possível localizar ou criar o usuário do remetente"""
    pass


class MessageDeliveryError(Exception):
    """Erro ao entregar mensagem pelo gateway do WhatsApp"""
    pass
