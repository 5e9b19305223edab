from boutique.models.user import User
from boutique.models.product import Product
from boutique.models.cart import CartItem
from boutique.models.address import Address
from boutique.models.order_item import OrderItem
from boutique.models.order import Order
from boutique.models.custom_order import CustomOrder
from boutique.models.fabric import Fabric
from boutique.models.blouse_design import BlouseDesign
from boutique.models.garment_model import BlouseModel, LehengaModel, SalwarKameezModel
from boutique.models.measurement import BlouseMeasurement, LehengaMeasurement, SalwarMeasurement

# add ALL models here
