# src/atlas_configmap/core/__init__.py
"""
Core do Atlas ConfigMap.

Este pacote contém o engine de mapeamento e merge, independente de
qualquer fachada de uso:

Componentes principais:
    - document → modelo de documento, leitura/escrita YAML e merge de defaults
    - schema   → walker de campos, marcadores e caminhos changeable
    - codecs   → ponto de extensão para tipos customizados
    - mapping  → materialização e serialização
    - dynamic  → raiz com acesso ad hoc ao documento
    - errors   → hierarquia canônica de exceções
    - settings → opções de I/O e formatação

Princípios fundamentais:
    - Valores do usuário nunca são sobrescritos por defaults
    - Operações são síncronas e sem estado oculto entre chamadas
    - Falhas são tipadas e propagadas ao chamador
"""
