"""Proxy de webhook Alertmanager -> Gotify.

Este pacote contém:
- constants: variáveis de ambiente, valores padrão e Settings
- errors: exceções do proxy
- models: estruturas do Alertmanager/Gotify e decodificação do webhook
- utils: busca com valor padrão e formatação de horário
- formatters: conversão de alerta em mensagem do Gotify
- services: envio para o Gotify
- controller: criação do Flask app e endpoints
"""
