# src/tiflash_config/core/config/__init__.py

"""
Camada de documentos de configuração do TiFlash Config.

Responsabilidades do pacote:
    - Representar documentos hierárquicos (ConfigDocument)
    - Carregar documentos parciais de YAML/JSON com overlay local
    - Gerar hash canônico para detecção de mudança

Invariantes:
    - Documentos têm semântica de valor (cópias independentes)
    - Divergência de tipo na leitura é sempre um erro explícito
"""
