"""Administrative HTTP surface for articlesum."""
