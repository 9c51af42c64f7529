# src/tiflash_config/core/__init__.py
"""
Core do TiFlash Config.

Componentes principais:
    - config    → ConfigDocument, erros tipados, loader, merge e hashing
    - topology  → ClusterTopology e resolução de endereços de serviço
    - synthesis → seleção de dialeto, defaults legacy/current e TLS

Princípios fundamentais:
    - Síntese pura: sem I/O, sem estado global, sem concorrência interna
    - Valores explícitos do usuário sempre prevalecem sobre defaults
    - A mesma entrada sempre produz os mesmos documentos
"""
