"""UFSC Civil Engineering curriculum (ten phases).

Hours are total class hours (H/A) per phase. Prerequisite groups use the
same OR-of-AND layout as ``Subject.prerequisites``.
"""
from app.models.subject import Subject


def req(*codes: str) -> tuple[tuple[str, ...], ...]:
    return (tuple(codes),)


CURRICULUM: tuple[Subject, ...] = (
    # Phase 1
    Subject("ECV2101", "Introdução à Engenharia Civil", 1, 54),
    Subject("EGR5213", "Representação Gráfica Espacial", 1, 54),
    Subject("EGR5604", "Desenho Técnico I", 1, 54),
    Subject("FSC5101", "Física I", 1, 72),
    Subject("MTM3110", "Cálculo 1", 1, 72),
    Subject("QMC5125", "Química Geral Experimental A", 1, 36),
    Subject("QMC5138", "Química Geral", 1, 36),
    # Phase 2
    Subject("ECV2201", "Introdução à Mecânica das Estruturas", 2, 36),
    Subject("ECV2202", "Topografia I", 2, 54, req("EGR5213", "EGR5604")),
    Subject("ECV2203", "Desenho Técnico para Engenharia Civil", 2, 54, req("EGR5213")),
    Subject("FSC5002", "Física II", 2, 72, req("FSC5101")),
    Subject("FSC5122", "Física Experimental I", 2, 54, req("FSC5101")),
    Subject("INE5201", "Introdução à Ciência da Computação", 2, 54),
    Subject("MTM3120", "Cálculo 2", 2, 72, req("MTM3110")),
    Subject("MTM3121", "Álgebra Linear", 2, 72),
    # Phase 3
    Subject("ARQ5115", "Arquitetura I", 3, 72, req("ECV2203")),
    Subject("ECV2301", "Ciência e Eng. de Materiais para a Eng. Civil", 3, 54, req("QMC5125", "QMC5138")),
    Subject("ECV2302", "Estática para Engenharia Civil", 3, 72, req("ECV2201", "FSC5101", "MTM3120")),
    Subject("ECV2303", "Geologia de Engenharia", 3, 54),
    Subject("ECV2304", "Topografia II", 3, 36, req("ECV2202")),
    Subject("EMC5425", "Fenômenos de Transportes", 3, 72, req("FSC5002")),
    Subject("INE5108", "Estatística e Probabilidade para Ciências Exatas", 3, 54, req("MTM3110")),
    Subject("MTM3131", "Equações Diferenciais Ordinárias", 3, 72, req("MTM3120")),
    # Phase 4
    Subject("ECV2401", "Análise Estrutural I", 4, 54, req("ECV2302")),
    Subject("ECV2402", "Geoprocessamento", 4, 72, req("ECV2304")),
    Subject("ECV2403", "Materiais de Construção I", 4, 54, req("ECV2301")),
    Subject("ECV2404", "Mecânica dos Sólidos I", 4, 72, req("ECV2302")),
    Subject("ECV2405", "Sistemas de Transporte", 4, 54, req("ECV2304")),
    Subject("ENS5101", "Hidráulica", 4, 90, req("EMC5425")),
    Subject("MTM3103", "Cálculo 3", 4, 72, req("MTM3120")),
    # Phase 5
    Subject("ARQ5515", "Urbanismo", 5, 54, req("ARQ5115", "ECV2402")),
    Subject("ECV2501", "Ações e Segurança nas Estruturas", 5, 36, req("INE5108")),
    Subject("ECV2502", "Estradas I", 5, 54, req("ECV2402")),
    Subject("ECV2503", "Física das Construções", 5, 54, req("EMC5425", "FSC5122")),
    Subject("ECV2504", "Materiais de Construção II", 5, 54, req("ECV2403")),
    Subject("ECV2505", "Mecânica dos Sólidos II", 5, 72, req("ECV2401", "ECV2404")),
    Subject("ECV2506", "Mecânica dos Solos I", 5, 54, req("ECV2303", "EMC5425")),
    Subject("INE5202", "Cálculo Numérico em Computadores", 5, 72, req("INE5201", "MTM3103")),
    # Phase 6
    Subject("ECV2601", "Análise Estrutural II", 6, 36, req("ECV2401", "ECV2505", "MTM3131")),
    Subject("ECV2602", "Concreto Armado I", 6, 54, req("ECV2401", "ECV2404", "ECV2501")),
    Subject("ECV2603", "Engenharia de Tráfego", 6, 54, req("ECV2405")),
    Subject("ECV2604", "Instalações Prediais I", 6, 54, req("ARQ5115", "ENS5101")),
    Subject("ECV2605", "Mecânica dos Solos II", 6, 72, req("ECV2404", "ECV2506")),
    Subject("ECV2606", "Técnicas de Construção I", 6, 54, req("ARQ5115", "ECV2403", "ECV2504")),
    Subject("ECV2607", "Técnicas de Construção II", 6, 54, req("ARQ5115", "ECV2403", "ECV2504")),
    Subject("ENS5102", "Hidrologia", 6, 72, req("ENS5101")),
    # Phase 7
    Subject("ECV2701", "Concreto Armado II", 7, 54, req("ECV2602", "MTM3103")),
    Subject("ECV2702", "Estradas II", 7, 36, req("ECV2502", "ECV2605", "ENS5102")),
    Subject("ECV2703", "Estruturas Metálicas e de Madeira", 7, 72, req("ECV2501", "ECV2504", "ECV2601")),
    Subject("ECV2704", "Expressão Oral e Escrita", 7, 54),
    Subject("ECV2705", "Fundações", 7, 54, req("ECV2605", "ECV2606")),
    Subject("ECV2706", "Instalações Prediais II", 7, 36, req("ARQ5115", "ENS5101")),
    Subject("ECV2707", "Planejamento Econômico e Financeiro", 7, 54, req("ECV2502", "ECV2606")),
    Subject("ENS5106", "Saneamento", 7, 72, req("ENS5101")),
    # Phase 8
    Subject("ECV2801", "Orçamento de Obras", 8, 54, req("ECV2606", "ECV2607")),
    Subject("ECV2802", "Pavimentação", 8, 72, req("ECV2702")),
    Subject("ECV2803", "Planejamento de Obras", 8, 54, req("ECV2606", "ECV2607")),
    # Phase 9
    Subject("ECV2901", "Legislação e Segurança do Trabalho", 9, 54, req("ECV2606", "ECV2607")),
    Subject("ECV2902", "Obras de Engenharia e Impacto Ambiental", 9, 36, req("ECV2402")),
    Subject(
        "ECV2903",
        "TCC: Projeto Integrador I",
        9,
        72,
        req(
            "ARQ5515", "ECV2503", "ECV2603", "ECV2604",
            "ECV2701", "ECV2703", "ECV2705", "ECV2706", "ECV2707",
            "ECV2801", "ECV2802", "ECV2803", "ENS5106", "INE5202",
        ),
    ),
    # Phase 10
    Subject("ECV2000", "Estágio Profissionalizante", 10, 540, req("ECV2404", "ECV2901", "ECV2902", "ECV2903")),
    Subject("ECV2002", "TCC: Projeto Integrador II", 10, 72, req("ECV2903")),
)
