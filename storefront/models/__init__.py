from storefront.models.user import User
from storefront.models.product import Product
from storefront.models.cart import Cart, CartItem
from storefront.models.order import Order
from storefront.models.order_item import OrderItem

# add ALL models here
