from fastapi import APIRouter, Depends, HTTPException, status

from ..core.deps import current_registry

router = APIRouter()


@router.get("", summary="Instrumentos disponibles")
async def list_instruments(registry=Depends(current_registry)):
    return [
        {
            "key": d.key,
            "name": d.name,
            "fullName": d.full_name,
            "prefix": d.prefix,
            "itemCount": len(d.items),
            "scale": d.scale.model_dump(),
            "crisisItems": list(d.crisis_item_ids),
            "contentWarning": d.content_warning is not None,
        }
        for d in registry.instruments
    ]


@router.get("/{key}", summary="Definición completa de un instrumento")
async def get_instrument(key: str, registry=Depends(current_registry)):
    definition = registry.get(key)
    if definition is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Instrumento no encontrado")
    return definition.model_dump()
