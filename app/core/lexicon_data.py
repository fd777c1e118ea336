"""
Portuguese sentiment word tables.

Keys are stored lowercase and accent-free; the analyzer also retries the
accented surface form, so a handful of accented spellings are kept where the
unaccented form collides with another word.

Positive weights are 1..3, negative weights -1..-3.
"""

POSITIVE_WORDS = {
    # strong
    "excelente": 3, "otimo": 3, "otima": 3, "maravilhoso": 3, "maravilhosa": 3,
    "fantastico": 3, "fantastica": 3, "incrivel": 3, "perfeito": 3, "perfeita": 3,
    "excepcional": 3, "extraordinario": 3, "sensacional": 3, "espetacular": 3,
    "adoro": 3, "amo": 3, "apaixonado": 3, "apaixonada": 3, "realizado": 3,
    "realizada": 3, "orgulho": 3, "orgulhoso": 3, "orgulhosa": 3, "encantado": 3,
    # medium
    "bom": 2, "boa": 2, "bons": 2, "boas": 2, "satisfeito": 2, "satisfeita": 2,
    "satisfacao": 2, "feliz": 2, "felizes": 2, "gosto": 2, "gosta": 2, "gostei": 2,
    "motivado": 2, "motivada": 2, "motivacao": 2, "engajado": 2, "engajada": 2,
    "valorizado": 2, "valorizada": 2, "reconhecido": 2, "reconhecida": 2,
    "reconhecimento": 2, "crescimento": 2, "oportunidade": 2, "oportunidades": 2,
    "desenvolvimento": 2, "aprendizado": 1, "aprendo": 2, "apoio": 2, "apoiado": 2,
    "apoiada": 2, "colaborativo": 2, "colaborativa": 2, "colaboracao": 2,
    "transparente": 2, "transparencia": 2, "claro": 1, "clara": 1, "clareza": 1,
    "eficiente": 2, "eficaz": 2, "produtivo": 2, "produtiva": 2, "positivo": 2,
    "positiva": 2, "agradavel": 2, "acolhedor": 2, "acolhedora": 2, "respeito": 2,
    "respeitado": 2, "respeitada": 2, "confianca": 2, "confio": 2, "seguro": 1,
    "segura": 1, "estavel": 1, "estabilidade": 2, "inspirador": 2, "inspiradora": 2,
    "competente": 2, "justo": 2, "justa": 2, "flexivel": 2, "flexibilidade": 2,
    "equilibrio": 2, "bem-estar": 2, "recomendo": 2, "parabens": 2, "sucesso": 2,
    "contente": 2, "grato": 2, "grata": 2, "gratidao": 2, "evoluir": 2, "evolucao": 2,
    "interessante": 2, "desafiador": 1, "desafiadora": 1, "construtivo": 2,
    "construtiva": 2, "presente": 1, "acessivel": 2, "aberto": 1, "aberta": 1,
    "ajuda": 1, "ajudou": 1, "melhor": 2, "melhorou": 2, "melhoria": 1,
    "qualidade": 1, "importante": 1, "valor": 1, "beneficios": 1, "feedbacks": 1,
    "tranquilo": 1, "tranquila": 1, "legal": 1, "adequado": 1, "adequada": 1,
    "suficiente": 1, "razoavel": 1, "ok": 1, "gratificante": 2, "dedicado": 2,
    "dedicada": 2, "comprometido": 2, "comprometida": 2, "unida": 2, "unido": 2,
}

NEGATIVE_WORDS = {
    # strong
    "pessimo": -3, "pessima": -3, "horrivel": -3, "terrivel": -3, "odeio": -3,
    "toxico": -3, "toxica": -3, "abusivo": -3, "abusiva": -3, "assedio": -3,
    "humilhante": -3, "desrespeito": -3, "desrespeitoso": -3, "burnout": -3,
    "esgotado": -3, "esgotada": -3, "injusto": -3, "injusta": -3, "inaceitavel": -3,
    "desesperado": -3, "desesperada": -3, "deprimido": -3, "deprimida": -3,
    # medium
    "ruim": -2, "ruins": -2, "insatisfeito": -2, "insatisfeita": -2,
    "insatisfacao": -2, "frustrado": -2, "frustrada": -2, "frustracao": -2,
    "frustrante": -2, "estressante": -2, "estresse": -2, "estressado": -2,
    "estressada": -2, "cansado": -2, "cansada": -2, "cansativo": -2, "desmotivado": -2,
    "desmotivada": -2, "desmotivacao": -2, "triste": -2, "decepcionado": -2,
    "decepcionada": -2, "decepcao": -2, "desvalorizado": -2, "desvalorizada": -2,
    "ignorado": -2, "ignorada": -2, "sobrecarregado": -2, "sobrecarregada": -2,
    "sobrecarga": -2, "pressao": -2, "dificil": -2, "problema": -2, "problemas": -2,
    "confuso": -2, "confusa": -2, "desorganizado": -2, "desorganizada": -2,
    "desorganizacao": -2, "falta": -2, "ausente": -2, "ausencia": -2, "inseguro": -2,
    "insegura": -2, "inseguranca": -2, "medo": -2, "preocupado": -2, "preocupada": -2,
    "preocupacao": -2, "incerteza": -2, "estagnado": -2, "estagnada": -2,
    "estagnacao": -2, "limitado": -2, "limitada": -2, "negativo": -2, "negativa": -2,
    "chato": -2, "chata": -2, "desanimado": -2, "desanimada": -2, "desigual": -2,
    "demora": -1, "lento": -1, "lenta": -1, "burocratico": -1, "burocracia": -1,
    "fraco": -2, "fraca": -2, "pouca": -1, "escasso": -2, "escassa": -2,
    "insuficiente": -2, "inadequado": -2, "inadequada": -2, "conflito": -2,
    "conflitos": -2, "reclamacao": -1, "critica": -1, "raramente": -1,
    "sair": -2, "saida": -2, "demissao": -2, "deixar": -1, "mudar": -1,
    "rotatividade": -2, "piorou": -2, "pior": -2, "mal": -2, "errado": -2,
    "errada": -2, "indiferente": -1, "distante": -1, "monotono": -1, "monotona": -1,
    "tedioso": -2, "tediosa": -2, "infeliz": -2, "irritado": -2, "irritada": -2,
}

NEGATION_WORDS = frozenset({
    "nao", "nunca", "jamais", "nem", "nenhum", "nenhuma", "sem", "ninguem",
    "nada", "tampouco",
})

INTENSIFIERS = {
    "muito": 1.5, "muita": 1.5, "muitos": 1.3, "muitas": 1.3, "bastante": 1.4,
    "extremamente": 2.0, "super": 1.6, "demais": 1.5, "tao": 1.4, "totalmente": 1.7,
    "completamente": 1.7, "absolutamente": 1.8, "realmente": 1.3, "sempre": 1.2,
    "altamente": 1.6, "incrivelmente": 1.8, "profundamente": 1.6, "bem": 1.2,
    "mega": 1.6, "mais": 1.2,
}

DIMINISHERS = {
    "pouco": 0.5, "poucos": 0.6, "levemente": 0.6, "ligeiramente": 0.6,
    "meio": 0.7, "quase": 0.7, "razoavelmente": 0.7, "parcialmente": 0.6,
    "relativamente": 0.7, "menos": 0.6, "apenas": 0.8, "algo": 0.8,
}

STOP_WORDS = frozenset({
    "de", "da", "do", "das", "dos", "em", "na", "no", "nas", "nos", "um", "uma",
    "uns", "umas", "para", "por", "com", "que", "se", "os", "as", "ao", "aos",
    "eu", "ele", "ela", "eles", "elas", "nós", "voce", "você", "meu", "minha",
    "seu", "sua", "isso", "isto", "esse", "essa", "este", "esta", "mas", "ou",
    "como", "quando", "onde", "foi", "ser", "ter", "tem", "há", "ja", "já",
    "estou", "está", "esta", "são", "sao", "pelo", "pela", "entre", "sobre",
    "também", "tambem", "me", "lhe", "nosso", "nossa", "aqui",
})
