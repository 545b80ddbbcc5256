from ..domain.model import Option

def option_to_dict(option: Option) -> dict:
    return {"id": option.id, "text": option.text}
