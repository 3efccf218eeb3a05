def _format_seconds_hms(total_seconds: float) -> str:
    '''
    Formata segundos em 'Hh MMmin SSs', 'Mmin SSs' ou 'Ss' conforme o caso.
    '''

    seconds = int(round(total_seconds))
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours > 0:
        return f"{hours}h {minutes:02d}min {secs:02d}s"
    if minutes > 0:
        return f"{minutes}min {secs:02d}s"
    return f"{secs}s"
