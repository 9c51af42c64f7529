# src/tiflash_config/core/synthesis/__init__.py
"""
Síntese da configuração efetiva do engine e do proxy.

Componentes principais:
    - dialect     → SchemaDialect e seleção por versão (limiar 5.4.0)
    - rules       → DefaultRule e avaliador set-if-absent
    - legacy      → tabela de defaults anterior a 5.4.0
    - current     → tabela de defaults a partir de 5.4.0
    - tls         → pós-processamento TLS
    - synthesizer → ponto de entrada `synthesize`
"""
