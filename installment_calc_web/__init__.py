"""Flask front end for the installment calculator."""
