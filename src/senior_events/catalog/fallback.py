"""Embedded catalog document used when no data source can be loaded."""

from typing import Any, Dict

FALLBACK_DOCUMENT: Dict[str, Any] = {
    "eventos_brasil": {
        "Festival Longevidade SESC": {
            "local": {"cidade": "São Paulo", "pais": "Brasil"},
            "tipo_espaco": "Centro cultural",
            "capacidade": "800 pessoas",
            "formato": ["Palestras", "Oficinas práticas", "Apresentações artísticas"],
            "duracao": "2 dias",
            "temas": ["Envelhecimento ativo", "Saúde", "Cultura digital"],
            "atividades": ["Dança sênior", "Oficina de smartphone", "Roda de memórias"],
            "organizadores": ["SESC São Paulo"],
            "parceiros": ["Prefeitura de São Paulo", "Universidade Aberta à Terceira Idade"],
            "networking": "Rodas de conversa intergeracionais nos intervalos",
            "impacto": "Ampliação do acesso a atividades culturais para mais de 1.500 idosos",
            "links": "https://www.sescsp.org.br",
        },
        "Encontro Nacional 60+ Conectados": {
            "local": "Rio de Janeiro, Brasil",
            "tipo_espaco": "Teatro",
            "capacidade": 350,
            "formato": "Híbrido (presencial e transmissão ao vivo)",
            "duracao": "1 dia (9h às 18h)",
            "temas": "Inclusão digital",
            "atividades_dinamicas": ["Mentoria reversa", "Speed networking"],
            "organizadores": ["Coletivo Conecta 60+", "Instituto Longevidade"],
            "networking_integracao": ["Café de boas-vindas", "Mural de conexões"],
            "impacto_feedback": "95% dos participantes recomendariam o evento",
            "links": [
                "https://example.org/conectados",
                "https://example.org/conectados/programacao",
            ],
        },
        "Mostra Sênior de Artes de Belo Horizonte": {
            "local": {"cidade": "Belo Horizonte", "pais": ""},
            "tipo_espaco": "Galeria municipal",
            "duracao": "3 semanas",
            "temas": ["Artes visuais", "Expressão cultural"],
            "organizadores": "Fundação Municipal de Cultura",
        },
    },
    "eventos_internacionais": {
        "Age Friendly Culture Festival": {
            "local": {"cidade": "Lisboa", "pais": "Portugal"},
            "tipo_espaco": "Centro de congressos",
            "capacidade": "1.200 participantes",
            "formato": ["Conferências", "Workshops", "Feira de inovação"],
            "duracao": "3 dias",
            "temas": ["Cidades amigas do idoso", "Tecnologias assistivas", "Bem-estar"],
            "atividades": ["Visitas guiadas acessíveis", "Laboratório de realidade virtual"],
            "organizadores": ["Câmara Municipal de Lisboa"],
            "parceiros": ["OMS Europa", "AGE Platform Europe"],
            "networking": "Aplicativo oficial para agendamento de reuniões",
            "impacto": "Recomendações publicadas para 40 municípios europeus",
            "links": ["https://example.org/agefriendly"],
        },
        "Silver Arts Week": {
            "local": {"cidade": "Singapura", "pais": "Singapura"},
            "tipo_espaco": "Museus e espaços públicos",
            "capacidade": "Aberto ao público",
            "formato": ["Exposições", "Espetáculos", "Oficinas"],
            "duracao": "Setembro (anual)",
            "temas": ["Envelhecimento criativo", "Intergeracionalidade"],
            "atividades_dinamicas": "Oficinas de teatro e música com artistas seniores",
            "organizadores": ["National Arts Council"],
            "impacto_feedback": ["Mais de 30 mil visitantes", "Programação em quatro idiomas"],
        },
        "Creative Aging Summit": {
            "local": "Nova York, Estados Unidos",
            "tipo_espaco": "Universidade",
            "capacidade": "500 pessoas",
            "formato": ["Painéis", "Sessões práticas"],
            "duracao": "2 dias",
            "temas": ["Envelhecimento criativo", "Políticas culturais"],
            "organizadores": ["Lifetime Arts"],
            "parceiros": ["Biblioteca Pública de Nova York"],
            "networking_integracao": {
                "formato": "Mesas temáticas",
                "ferramenta": "Diretório online de participantes",
            },
        },
    },
    "tendencias_2025_2026": {
        "tecnologias_assistivas": [
            "Legendas e tradução simultânea em tempo real",
            "Loops de indução para aparelhos auditivos",
            "Sinalização aumentada e de alto contraste",
        ],
        "gamificacao": [
            "Sistemas de pontos por participação",
            "Desafios em grupo entre gerações",
        ],
        "experiencias_sensoriais": [
            "Música ao vivo e oficinas de ritmo",
            "Degustações e aromaterapia",
        ],
        "formatos_inovadores": [
            "Eventos híbridos com transmissão acessível",
            "Mentoria reversa",
        ],
        "inclusao_participacao": "Curadoria compartilhada com participantes 60+",
    },
}
