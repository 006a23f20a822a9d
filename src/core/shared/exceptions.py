"""
Exceções de Domínio da camada CRUD.

Este módulo define as exceções que atravessam as camadas de forma
tipada. Erros do ORM (IntegrityError, OperationalError) NÃO são
traduzidos: propagam sem alteração até o chamador.

Hierarquia:
    DomainException (base)
    ├── BusinessException (regra de negócio violada em um hook)
    └── EntityNotFoundError (entidade não existe no repositório)
"""


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Permite capturar qualquer erro de domínio de forma genérica.

    Example:
        try:
            service.insert(produto)
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class BusinessException(DomainException):
    """
    Violação de regra de negócio.

    Único canal de erro dos hooks de validação do CrudService.
    Lançada para abortar a operação antes da persistência.

    Example:
        def validate_insert(self, model):
            if not model.descricao:
                raise BusinessException(
                    "Descrição obrigatória",
                    rule="DESCRICAO_OBRIGATORIA",
                )
    """

    def __init__(self, message: str, rule: str = None):
        self.rule = rule
        super().__init__(message, "BUSINESS_EXCEPTION")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.rule:
            result["rule"] = self.rule
        return result


class EntityNotFoundError(DomainException):
    """
    Entidade não encontrada no repositório.

    Lançada pelo repositório ao remover um ID inexistente e
    por SearchService.get_by_id.
    """

    def __init__(self, message: str, entity_type: str = None, entity_id=None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id is not None:
            result["entity_id"] = str(self.entity_id)
        return result
