"""App: núcleo do relay: casos de uso, domínio e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (um por rota, sem leitura de env)
- domain/: payloads tipados e imutáveis
- infra/: implementações concretas de IO (HTTP, Drive, Stripe)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas via logs

Padrão: app executa; api adapta; config configura; utils apoia.
"""
