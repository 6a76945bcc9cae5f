# src/atlas_configmap/core/errors.py
"""
Exceções canônicas do Atlas ConfigMap.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento, merge, materialização e serialização de configurações.

As exceções aqui definidas representam **falhas fatais explícitas**:
nenhuma delas é tratada internamente pelo engine, e todas são propagadas
ao chamador imediato da operação que falhou.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - A causa original é sempre encadeada (`raise ... from`)
    - Nenhum retry, fallback ou resultado parcial

Invariantes:
    - Todas as exceções do pacote herdam de `ConfigError`
    - Uma falha durante a materialização aborta a raiz inteira

Limites explícitos:
    - Não registra logs
    - Não realiza recovery
    - Dados ausentes não são erro (o campo mantém seu valor zero)
"""


class ConfigError(Exception):
    """
    Exceção base para erros do Atlas ConfigMap.

    Esta hierarquia permite:
        - captura genérica de qualquer falha de configuração
        - distinção entre falhas de I/O, parse, schema e conversão
    """


class ConfigIOError(ConfigError):
    """
    Falha ao criar, ler ou escrever um arquivo de configuração.

    Decisões arquiteturais:
        - A falha é fatal e não é repetida
        - O `OSError` original é encadeado como causa
    """


class ConfigParseError(ConfigError):
    """
    Documento YAML malformado.

    Um documento vazio **não** é erro: ele é interpretado como um
    mapeamento vazio.
    """


class InvalidConfigRootTypeError(ConfigParseError):
    """
    O conteúdo raiz do documento não é um mapeamento (`dict`).

    Listas ou escalares no root são inválidos para configuração.
    """


class ConstructionError(ConfigError):
    """
    O tipo alvo não possui construtor utilizável e nenhum codec o cobre.

    Levantada na primeira tentativa de materialização do tipo.
    """


class EnumMappingError(ConfigError, ValueError):
    """
    Texto armazenado não corresponde a nenhuma constante do enum alvo.

    A busca é feita por nome exato (case-sensitive).
    """


class UnsupportedContainerError(ConfigError):
    """
    O tipo de container declarado não possui estratégia conhecida
    de construção vazia (ex.: `defaultdict`, `Counter`).
    """


class DuplicateCodecError(ConfigError, ValueError):
    """
    Tentativa de registrar um segundo codec para o mesmo tipo alvo.

    Decisões arquiteturais:
        - Apenas um codec por tipo alvo
        - A duplicidade é detectada no registro, não na materialização
    """


class ValueCoercionError(ConfigError, ValueError):
    """
    Valor armazenado não pode ser convertido para o tipo escalar declarado.

    Exemplos: texto não numérico em um campo `int`, mapeamento em um
    campo `bool`. O valor bruto nunca é atribuído ao campo.
    """


class SerializationError(ConfigError):
    """
    Valor sem codec e sem campos mapeados não pode ser escrito no documento.

    Tipos folha como `Path`, `UUID` ou `Decimal` exigem um codec.
    """
