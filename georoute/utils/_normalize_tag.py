def _normalize_tag(tag: str | None) -> str:
    '''
    Normaliza a tag de highway (minúsculas, sem espaços nas pontas).
    None vira string vazia.

    Parâmetros
    ----------
    tag : str | None (tag original do OSM/CSV)

    Retorno
    ---------
    str : tag normalizada
    '''

    if tag is None:
        return ""
    return str(tag).strip().lower()
