from fastapi import APIRouter, Depends, HTTPException, status
from typing import Any, List
from core.exceptions import BusinessRuleError
from schemas.address import Address, AddressCreate, AddressUpdate, RestaurantAddressCreate
from api.deps import get_current_user, get_current_admin_user, get_address_service
from schemas.user import UserInDB
from services.address_service import AddressService

router = APIRouter()


def address_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Address not found"
    )


@router.get("/", response_model=List[Address])
async def get_user_addresses(
        current_user: UserInDB = Depends(get_current_user),
        addresses: AddressService = Depends(get_address_service)
) -> Any:
    """
    Get user's addresses
    """
    return addresses.get_by_user_id(current_user.id)


@router.post("/", response_model=Address, status_code=status.HTTP_201_CREATED)
async def create_address(
        address_in: AddressCreate,
        current_user: UserInDB = Depends(get_current_user),
        addresses: AddressService = Depends(get_address_service)
) -> Any:
    """
    Create a new address; the user's first address becomes the default
    """
    return addresses.create_for_user(current_user.id, address_in.model_dump())


@router.get("/restaurants/{restaurant_id}", response_model=List[Address])
async def get_restaurant_addresses(
        restaurant_id: str,
        addresses: AddressService = Depends(get_address_service)
) -> Any:
    """
    Get a restaurant's addresses
    """
    return addresses.get_by_restaurant_id(restaurant_id)


@router.post("/restaurants", response_model=Address, status_code=status.HTTP_201_CREATED)
async def create_restaurant_address(
        address_in: RestaurantAddressCreate,
        current_user: UserInDB = Depends(get_current_admin_user),
        addresses: AddressService = Depends(get_address_service)
) -> Any:
    """
    Create a restaurant address (admin only)
    """
    data = address_in.model_dump(exclude={"restaurant_id"})
    return addresses.create_for_restaurant(address_in.restaurant_id, data)


@router.get("/{address_id}", response_model=Address)
async def get_address(
        address_id: str,
        current_user: UserInDB = Depends(get_current_user),
        addresses: AddressService = Depends(get_address_service)
) -> Any:
    """
    Get a specific address
    """
    address = addresses.get_for_user(current_user.id, address_id)
    if not address:
        raise address_not_found()
    return address


@router.put("/{address_id}", response_model=Address)
async def update_address(
        address_id: str,
        address_in: AddressUpdate,
        current_user: UserInDB = Depends(get_current_user),
        addresses: AddressService = Depends(get_address_service)
) -> Any:
    """
    Update an address
    """
    updated = addresses.update_for_user(
        current_user.id, address_id, address_in.model_dump(exclude_unset=True)
    )
    if not updated:
        raise address_not_found()
    return updated


@router.put("/{address_id}/default", response_model=Address)
async def set_default_address(
        address_id: str,
        current_user: UserInDB = Depends(get_current_user),
        addresses: AddressService = Depends(get_address_service)
) -> Any:
    """
    Make an address the user's default
    """
    if not addresses.get_for_user(current_user.id, address_id):
        raise address_not_found()
    return addresses.set_default(current_user.id, address_id)


@router.delete("/{address_id}", status_code=status.HTTP_200_OK)
async def delete_address(
        address_id: str,
        current_user: UserInDB = Depends(get_current_user),
        addresses: AddressService = Depends(get_address_service)
) -> Any:
    """
    Delete an address. The last remaining address cannot be deleted.
    """
    try:
        removed = addresses.remove_for_user(current_user.id, address_id)
    except BusinessRuleError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    if not removed:
        raise address_not_found()

    return {"message": "Address deleted successfully"}
