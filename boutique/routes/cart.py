from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select
from boutique.constants.products import is_custom_product
from boutique.database import get_session
from boutique.models.cart import CartItem
from boutique.models.product import Product
from boutique.models.user import User
from boutique.schemas.cart_schemas import CartAddRequest
from boutique.services.order_intake import clear_cart
from boutique.utils.token import get_current_user


router = APIRouter()

# Add to Cart

@router.post("/add")
def add_to_cart(
    data: CartAddRequest,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user)
):
    if not is_custom_product(data.product_id) and not session.get(Product, data.product_id):
        raise HTTPException(status_code=404, detail="Product not found")

    # Same product in the same size/color only bumps the quantity
    existing_item = session.exec(
        select(CartItem).where(
            CartItem.user_id == current_user.id,
            CartItem.product_id == data.product_id,
            CartItem.size == data.size,
            CartItem.color == data.color,
        )
    ).first()

    if existing_item:
        existing_item.quantity += data.quantity
        session.add(existing_item)
        session.commit()
        session.refresh(existing_item)
        return {"message": "Cart updated", "item": existing_item}

    new_item = CartItem(
        user_id=current_user.id,
        product_id=data.product_id,
        quantity=data.quantity,
        size=data.size,
        color=data.color,
    )

    session.add(new_item)
    session.commit()
    session.refresh(new_item)

    return {"message": "Added to cart", "item": new_item}


# View Cart

@router.get("")
def get_cart(
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user)
):
    cart_items = session.exec(
        select(CartItem)
        .where(CartItem.user_id == current_user.id)
        .order_by(CartItem.created_at)
    ).all()

    return {"items": cart_items, "count": len(cart_items)}


# Remove Cart

@router.delete("/remove/{item_id}")
def remove_item(
    item_id: int,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user)
):
    item = session.get(CartItem, item_id)

    if not item or item.user_id != current_user.id:
        raise HTTPException(404, "Item not found")

    session.delete(item)
    session.commit()

    return {"message": "Item removed from cart"}


# Clear Cart

@router.delete("/clear")
def clear_cart_endpoint(
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user)
):
    clear_cart(session, current_user.id)
    session.commit()
    return {"message": "Cart cleared"}
